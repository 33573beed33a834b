from typing import List, Optional, Sequence, Set
from uuid import uuid4
from core.config import settings
from core.logger import logger
from models.quiz import Question
from models.result import QuizResult
from models.session import (
    AnswerSheet,
    PositionStatus,
    QuestionMapEntry,
    QuizSettings,
    SessionSnapshot,
    SessionStatus,
    UserAnswer,
)
from services.scoring_service import score_session
from services.timer_service import TimerController

DEFAULT_HINT = "Analyze all options carefully. One is logically superior to others."


class QuizEngineError(Exception):
    """Base class for rejected engine operations."""
    pass


class InvalidNavigationError(QuizEngineError, ValueError):
    pass


class InvalidAnswerError(QuizEngineError, ValueError):
    pass


class IllegalTransitionError(QuizEngineError):
    pass


class SessionAlreadyCompletedError(IllegalTransitionError):
    pass


class QuizEngine:
    """
    Navigation and answer state machine for one quiz attempt.

    The question sequence is frozen at construction. All mutation goes through
    the public methods below; each runs to completion before the next tick.
    """

    def __init__(
        self,
        questions: Sequence[Question],
        category: str,
        quiz_settings: Optional[QuizSettings] = None,
        sub_topic: Optional[str] = None,
        session_id: Optional[str] = None,
    ):
        self.session_id = session_id or uuid4().hex
        self.questions = tuple(questions)
        self.category = category
        self.sub_topic = sub_topic
        self.quiz_settings = quiz_settings or QuizSettings()

        self.position = 0
        self.answers = AnswerSheet()
        self.marked_for_review: Set[int] = set()
        self.show_hint = False
        self.result: Optional[QuizResult] = None

        if not self.questions:
            # Nothing to navigate: no timers, no scoring.
            self.status = SessionStatus.NO_CONTENT
            self.timers = None
            logger.info("Quiz session has no content", session_id=self.session_id, category=category, sub_topic=sub_topic)
            return

        self.status = SessionStatus.ACTIVE
        self.timers = TimerController(self.time_limit_for(0), show_timer=self.quiz_settings.show_timer)

    # --- State ---

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def is_empty(self) -> bool:
        return self.status is SessionStatus.NO_CONTENT

    @property
    def is_running(self) -> bool:
        return self.status in (SessionStatus.ACTIVE, SessionStatus.AWAITING_CONFIRMATION)

    @property
    def is_last(self) -> bool:
        return self.position == self.total_questions - 1

    @property
    def current_question(self) -> Question:
        self._require_content()
        return self.questions[self.position]

    @property
    def current_answer(self) -> Optional[UserAnswer]:
        return self.answers.get(self.current_question.id)

    @property
    def current_hint(self) -> str:
        return self.current_question.hint or DEFAULT_HINT

    @property
    def elapsed_seconds(self) -> int:
        return self.timers.elapsed_seconds if self.timers else 0

    @property
    def remaining_seconds(self) -> int:
        return self.timers.remaining_seconds if self.timers else 0

    @property
    def attempted_count(self) -> int:
        return sum(1 for a in self.answers if a.is_attempted)

    def time_limit_for(self, position: int) -> int:
        return self.questions[position].time_limit or settings.DEFAULT_QUESTION_TIME_LIMIT

    # --- Answers ---

    def select(self, option_index: Optional[int]):
        """Record (or replace) the answer to the current question. None means no selection."""
        self._require(SessionStatus.ACTIVE, "select")
        question = self.current_question
        if option_index is not None and not 0 <= option_index < len(question.options):
            raise InvalidAnswerError(
                f"Option {option_index} is out of range for question {question.id}"
            )
        self.answers.record(UserAnswer(
            question_id=question.id,
            selected_option=option_index,
            time_taken=self.timers.time_taken(),
        ))

    # --- Navigation ---

    def advance(self):
        self._require(SessionStatus.ACTIVE, "advance")
        if self.is_last:
            self._await_confirmation("last_question")
            return
        self._move_to(self.position + 1)

    def retreat(self):
        self._require(SessionStatus.ACTIVE, "retreat")
        if self.position == 0:
            return
        self._move_to(self.position - 1)

    def skip(self):
        self._require(SessionStatus.ACTIVE, "skip")
        if self.current_question.id not in self.answers:
            self.select(None)
        self.advance()

    def jump(self, position: int):
        self._require(SessionStatus.ACTIVE, "jump")
        if not isinstance(position, int) or not 0 <= position < self.total_questions:
            raise InvalidNavigationError(
                f"Position {position} is outside 0..{self.total_questions - 1}"
            )
        if position != self.position:
            self._move_to(position)

    def toggle_review(self):
        self._require(SessionStatus.ACTIVE, "toggle_review")
        if self.position in self.marked_for_review:
            self.marked_for_review.discard(self.position)
        else:
            self.marked_for_review.add(self.position)

    def toggle_hint(self):
        self._require(SessionStatus.ACTIVE, "toggle_hint")
        self.show_hint = not self.show_hint

    # --- Submission ---

    def request_submission(self):
        self._require(SessionStatus.ACTIVE, "request_submission")
        self._await_confirmation("user")

    def cancel_submission(self):
        self._require(SessionStatus.AWAITING_CONFIRMATION, "cancel_submission")
        self.status = SessionStatus.ACTIVE

    def confirm_submission(self) -> QuizResult:
        if self.status is SessionStatus.COMPLETED:
            raise SessionAlreadyCompletedError(f"Session {self.session_id} has already been submitted")
        self._require(SessionStatus.AWAITING_CONFIRMATION, "confirm_submission")

        self.timers.stop()
        self.status = SessionStatus.COMPLETED
        self.result = score_session(
            self.questions,
            self.answers.as_dict(),
            time_spent=self.timers.elapsed_seconds,
            category=self.category,
            sub_topic=self.sub_topic,
            session_id=self.session_id,
        )
        logger.info(
            "Quiz session completed",
            session_id=self.session_id,
            score=self.result.score,
            correct=self.result.correct_count,
            wrong=self.result.wrong_count,
            skipped=self.result.skipped_count,
            time_spent=self.result.time_spent,
        )
        return self.result

    def abandon(self):
        """Exit without submitting. No result is produced."""
        if not self.is_running:
            raise IllegalTransitionError(f"Cannot abandon a session in state {self.status.value}")
        self.timers.stop()
        self.status = SessionStatus.ABANDONED
        logger.info("Quiz session abandoned", session_id=self.session_id, position=self.position)

    # --- Clock ---

    def tick(self):
        """One second of session time. Ignored once the session is terminal."""
        if not self.is_running:
            return
        expired = self.timers.tick(count_question=self.status is SessionStatus.ACTIVE)
        if not expired:
            return

        logger.debug("Question time expired", session_id=self.session_id, position=self.position)
        if self.is_last:
            self._await_confirmation("time_expired")
        else:
            self.skip()

    # --- Read models ---

    def question_map(self) -> List[QuestionMapEntry]:
        entries = []
        for i, question in enumerate(self.questions):
            answer = self.answers.get(question.id)
            if answer is not None and answer.is_attempted:
                status = PositionStatus.ANSWERED
            elif i in self.marked_for_review:
                status = PositionStatus.MARKED
            elif answer is not None:
                status = PositionStatus.SKIPPED
            else:
                status = PositionStatus.UNVISITED
            entries.append(QuestionMapEntry(position=i, question_id=question.id, status=status, current=i == self.position))
        return entries

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            status=self.status,
            position=self.position,
            total_questions=self.total_questions,
            elapsed_seconds=self.elapsed_seconds,
            remaining_seconds=self.remaining_seconds,
            answers=self.answers.as_dict(),
            marked_for_review=tuple(sorted(self.marked_for_review)),
            show_hint=self.show_hint,
        )

    # --- Internals ---

    def _move_to(self, position: int):
        self.position = position
        self.show_hint = False
        self.timers.reset_question(self.time_limit_for(position))

    def _await_confirmation(self, reason: str):
        self.status = SessionStatus.AWAITING_CONFIRMATION
        logger.info("Submission requested", session_id=self.session_id, reason=reason, attempted=self.attempted_count)

    def _require_content(self):
        if self.is_empty:
            raise IllegalTransitionError("Session has no questions")

    def _require(self, expected: SessionStatus, operation: str):
        self._require_content()
        if self.status is not expected:
            raise IllegalTransitionError(
                f"{operation} is not allowed in state {self.status.value}"
            )
