from datetime import datetime, timezone
from typing import List, Mapping, Optional, Sequence
from uuid import uuid4
from core.config import settings
from models.quiz import Question
from models.result import AnswerOutcome, QuizResult, ReviewItem
from models.session import UserAnswer


def classify(question: Question, answer: Optional[UserAnswer]) -> AnswerOutcome:
    if answer is None or answer.selected_option is None:
        return AnswerOutcome.SKIPPED
    if answer.selected_option == question.correct_answer:
        return AnswerOutcome.CORRECT
    return AnswerOutcome.WRONG


def score_session(
    questions: Sequence[Question],
    answers: Mapping[str, UserAnswer],
    time_spent: int,
    category: str,
    sub_topic: Optional[str] = None,
    session_id: Optional[str] = None,
    completed_at: Optional[datetime] = None,
) -> QuizResult:
    """
    Build the score report for a finished session.

    Every question in the sequence is classified exactly once. Scoring is
    POINTS_PER_CORRECT per correct answer, with no partial credit and no
    negative marking.
    """
    correct = wrong = skipped = 0
    recorded = []
    for question in questions:
        answer = answers.get(question.id)
        if answer is not None:
            recorded.append(answer)

        outcome = classify(question, answer)
        if outcome is AnswerOutcome.CORRECT:
            correct += 1
        elif outcome is AnswerOutcome.WRONG:
            wrong += 1
        else:
            skipped += 1

    return QuizResult(
        id=session_id or uuid4().hex,
        category=category,
        sub_topic=sub_topic,
        score=correct * settings.POINTS_PER_CORRECT,
        total_questions=len(questions),
        correct_count=correct,
        wrong_count=wrong,
        skipped_count=skipped,
        time_spent=max(0, int(time_spent)),
        completed_at=completed_at or datetime.now(timezone.utc),
        answers=tuple(recorded),
    )


def build_review(questions: Sequence[Question], result: QuizResult) -> List[ReviewItem]:
    """Pair each question with its recorded answer and outcome, in sequence order."""
    by_id = {a.question_id: a for a in result.answers}
    items = []
    for i, question in enumerate(questions):
        answer = by_id.get(question.id)
        items.append(ReviewItem(position=i, question=question, answer=answer, outcome=classify(question, answer)))
    return items
