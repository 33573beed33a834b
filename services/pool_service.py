from typing import Iterable, List, Optional
from models.quiz import ALL_CATEGORIES, Category, Question


def filter_pool(catalog: Iterable[Question], category_id: str, sub_topic: Optional[str] = None) -> List[Question]:
    """Eligible questions for a category and optional sub-topic. Empty when nothing matches."""
    pool = [q for q in catalog if category_id == ALL_CATEGORIES or q.category == category_id]
    if sub_topic:
        pool = [q for q in pool if q.sub_topic == sub_topic]
    return pool


def find_category(categories: Iterable[Category], category_id: str) -> Optional[Category]:
    for category in categories:
        if category.id == category_id:
            return category
    return None
