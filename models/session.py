from enum import Enum
from typing import Dict, Iterator, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from core.config import settings


class SessionStatus(str, Enum):
    ACTIVE = "active"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    COMPLETED = "completed"
    ABANDONED = "abandoned"
    NO_CONTENT = "no_content"


class PositionStatus(str, Enum):
    ANSWERED = "answered"
    MARKED = "marked"
    SKIPPED = "skipped"
    UNVISITED = "unvisited"


class QuizSettings(BaseModel):
    """Per-attempt settings supplied by the caller."""
    model_config = ConfigDict(frozen=True)

    questions_per_quiz: int = Field(default_factory=lambda: settings.QUESTIONS_PER_QUIZ, ge=1)
    show_timer: bool = Field(default_factory=lambda: settings.SHOW_TIMER)


class UserAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: str
    selected_option: Optional[int] = Field(None, ge=0, description="None means no selection")
    time_taken: int = Field(0, ge=0)

    @property
    def is_attempted(self) -> bool:
        return self.selected_option is not None


class AnswerSheet:
    """Answers keyed by question id. `record` is the only way to write."""

    def __init__(self):
        self._answers: Dict[str, UserAnswer] = {}

    def record(self, answer: UserAnswer) -> None:
        self._answers[answer.question_id] = answer

    def get(self, question_id: str) -> Optional[UserAnswer]:
        return self._answers.get(question_id)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._answers

    def __len__(self) -> int:
        return len(self._answers)

    def __iter__(self) -> Iterator[UserAnswer]:
        return iter(list(self._answers.values()))

    def as_dict(self) -> Dict[str, UserAnswer]:
        return dict(self._answers)


class QuestionMapEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int
    question_id: str
    status: PositionStatus
    current: bool = False


class SessionSnapshot(BaseModel):
    """Read-only copy of the session taken between ticks and operations."""
    model_config = ConfigDict(frozen=True)

    session_id: str
    status: SessionStatus
    position: int
    total_questions: int
    elapsed_seconds: int
    remaining_seconds: int
    answers: Dict[str, UserAnswer]
    marked_for_review: Tuple[int, ...]
    show_hint: bool = False
