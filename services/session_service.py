import random
from typing import Iterable, List, Optional, Sequence, TypeVar
from core.config import settings
from core.logger import logger
from models.quiz import Category, Question
from models.session import QuizSettings
from services.pool_service import filter_pool, find_category
from services.quiz_service import QuizEngine

T = TypeVar("T")


def shuffle_questions(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Uniformly shuffled copy of `items` (Fisher-Yates via random.shuffle)."""
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled


class SessionService:
    def __init__(self, quiz_settings: Optional[QuizSettings] = None, rng: Optional[random.Random] = None):
        self.quiz_settings = quiz_settings or QuizSettings()
        self.rng = rng or random.Random()

    def resolve_limit(self, category: Optional[Category] = None, sub_topic: Optional[str] = None) -> int:
        # Sub-topic drills get the larger fixed cap
        if sub_topic:
            return settings.SUBTOPIC_QUESTION_LIMIT
        if category and category.max_questions:
            return category.max_questions
        return self.quiz_settings.questions_per_quiz

    def build_sequence(self, candidates: Sequence[Question], limit: int) -> List[Question]:
        return shuffle_questions(candidates, self.rng)[:max(0, limit)]

    def create_session(
        self,
        catalog: Iterable[Question],
        category_id: str,
        sub_topic: Optional[str] = None,
        categories: Iterable[Category] = (),
    ) -> QuizEngine:
        candidates = filter_pool(catalog, category_id, sub_topic)
        limit = self.resolve_limit(find_category(categories, category_id), sub_topic)
        sequence = self.build_sequence(candidates, limit)

        engine = QuizEngine(sequence, category_id, self.quiz_settings, sub_topic=sub_topic)
        logger.info(
            "Quiz session created",
            session_id=engine.session_id,
            category=category_id,
            sub_topic=sub_topic,
            candidates=len(candidates),
            total_questions=engine.total_questions,
        )
        return engine
