from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from models.quiz import Question
from models.session import UserAnswer


class QuizResult(BaseModel):
    """Score report produced once per completed session."""
    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    sub_topic: Optional[str] = None
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    correct_count: int = Field(..., ge=0)
    wrong_count: int = Field(..., ge=0)
    skipped_count: int = Field(..., ge=0)
    time_spent: int = Field(..., ge=0, description="Global elapsed seconds at submission")
    completed_at: datetime
    answers: Tuple[UserAnswer, ...] = ()

    @model_validator(mode="after")
    def _check_counts(self):
        if self.correct_count + self.wrong_count + self.skipped_count != self.total_questions:
            raise ValueError("correct + wrong + skipped must equal total_questions")
        return self

    @property
    def accuracy(self) -> int:
        """Correct answers as a rounded percentage of all questions."""
        if not self.total_questions:
            return 0
        return round(self.correct_count / self.total_questions * 100)


class AnswerOutcome(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    SKIPPED = "skipped"


class ReviewItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int
    question: Question
    answer: Optional[UserAnswer] = None
    outcome: AnswerOutcome


class AIAnalysisReport(BaseModel):
    """Narrative feedback returned by the analysis model (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    patterns: List[str] = Field(default_factory=list)
    time_management: str = ""
    action_plan: List[str] = Field(default_factory=list)
    motivational_message: str = ""
