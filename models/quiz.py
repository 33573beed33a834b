from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

ALL_CATEGORIES = "all"


class Question(BaseModel):
    """A single multiple-choice question from the catalog."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    category: str
    sub_topic: Optional[str] = Field(None, description="Finer-grained label inside the category")
    question: str = Field(..., description="The question text")
    options: Tuple[str, ...] = Field(..., min_length=2, description="Answer options (at least 2)")
    correct_answer: int = Field(..., ge=0, description="Index of the correct option (0-based)")
    explanation: str = ""
    difficulty: str = "Medium"
    hint: Optional[str] = None
    time_limit: Optional[PositiveInt] = Field(None, description="Seconds allowed for this question")

    @model_validator(mode="after")
    def _check_correct_answer(self):
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    max_questions: Optional[PositiveInt] = None
    description: str = ""
