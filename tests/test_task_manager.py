import asyncio
import unittest
from models.quiz import Question
from models.session import QuizSettings, SessionStatus
from services.quiz_service import QuizEngine
from services.task_manager import task_manager

QUESTIONS = [
    Question(id=f"q{i}", category="gk", question=f"Question {i}?", options=["a", "b"], correct_answer=0)
    for i in range(3)
]


def _engine():
    # Untimed so the countdown cannot move the session on its own
    return QuizEngine(QUESTIONS, "gk", QuizSettings(show_timer=False))


class TestSessionClock(unittest.IsolatedAsyncioTestCase):
    async def test_clock_ticks_until_completion(self):
        engine = _engine()
        task = task_manager.start_clock(engine, interval=0.001)
        self.assertTrue(task_manager.has_task(engine.session_id))

        await asyncio.sleep(0.05)
        self.assertGreater(engine.elapsed_seconds, 0)

        engine.request_submission()
        result = engine.confirm_submission()
        await asyncio.wait_for(task, timeout=1)
        await asyncio.sleep(0)

        self.assertEqual(engine.status, SessionStatus.COMPLETED)
        self.assertEqual(engine.elapsed_seconds, result.time_spent)
        self.assertFalse(task_manager.has_task(engine.session_id))

    async def test_cancel_on_abandon(self):
        engine = _engine()
        task = task_manager.start_clock(engine, interval=0.001)
        await asyncio.sleep(0.01)

        engine.abandon()
        task_manager.cancel_task(engine.session_id)
        with self.assertRaises(asyncio.CancelledError):
            await task
        self.assertFalse(task_manager.has_task(engine.session_id))

    async def test_restart_replaces_previous_clock(self):
        engine = _engine()
        first = task_manager.start_clock(engine, interval=0.001)
        second = task_manager.start_clock(engine, interval=0.001)
        await asyncio.sleep(0.005)

        self.assertTrue(first.cancelled())
        self.assertFalse(second.done())

        task_manager.cancel_task(engine.session_id)
        with self.assertRaises(asyncio.CancelledError):
            await second


if __name__ == '__main__':
    unittest.main()
