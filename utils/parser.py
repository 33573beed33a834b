import json
from typing import Any, Dict, List, Tuple
from pydantic import ValidationError
from core.logger import logger
from models.quiz import Category, Question

class ParserError(Exception):
    """Custom exception for catalog loading errors."""
    pass

def load_catalog(file_path: str) -> Tuple[List[Question], List[Category], List[str]]:
    """Reads a JSON catalog file with `questions` and `categories` arrays."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to read catalog file", path=file_path, error=str(e))
        raise ParserError(f"Could not read catalog: {e}") from e
    return parse_catalog(data)

def parse_catalog(data: Dict[str, Any]) -> Tuple[List[Question], List[Category], List[str]]:
    """
    Validates raw catalog records.

    Invalid records are reported in the error list and skipped; valid ones are kept.
    """
    if not isinstance(data, dict):
        raise ParserError("Catalog must be a JSON object")

    questions, errors = _parse_records(data.get("questions") or [], Question, "Question")
    categories, category_errors = _parse_records(data.get("categories") or [], Category, "Category")
    errors.extend(category_errors)

    seen = set()
    unique = []
    for q in questions:
        if q.id in seen:
            errors.append(f"Question {q.id}: duplicate id")
            continue
        seen.add(q.id)
        unique.append(q)

    if not unique and not errors:
        raise ParserError("Catalog contains no questions")

    if errors:
        logger.warning("Catalog loaded with errors", questions=len(unique), errors=len(errors))
    return unique, categories, errors

def _parse_records(raw: List[Any], model, label: str):
    parsed = []
    errors = []
    for i, record in enumerate(raw, 1):
        try:
            parsed.append(model.model_validate(_normalize(record)))
        except ValidationError as e:
            first = e.errors()[0]
            where = ".".join(str(p) for p in first["loc"]) or "record"
            errors.append(f"{label} #{i}: {where}: {first['msg']}")
    return parsed, errors

def _normalize(record: Any) -> Any:
    # Accept the camelCase keys used by content exports
    if not isinstance(record, dict):
        return record
    aliases = {
        "correctAnswer": "correct_answer",
        "timeLimit": "time_limit",
        "maxQuestions": "max_questions",
        "type": "sub_topic",
    }
    return {aliases.get(k, k): v for k, v in record.items()}
