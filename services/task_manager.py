import asyncio
from typing import Dict, Optional
from core.config import settings
from core.logger import logger
from services.quiz_service import QuizEngine

class TaskManager:
    _instance = None
    _tasks: Dict[str, asyncio.Task] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(TaskManager, cls).__new__(cls)
        return cls._instance

    def start_clock(self, engine: QuizEngine, interval: Optional[float] = None) -> Optional[asyncio.Task]:
        """Drive `engine.tick()` once per interval. Returns None for sessions that never run."""
        if not engine.is_running:
            logger.debug(f"Not starting clock for idle session {engine.session_id}")
            return None
        task = asyncio.create_task(self._run_clock(engine, interval or settings.TICK_INTERVAL_SECONDS))
        self.register_task(engine.session_id, task)
        return task

    async def _run_clock(self, engine: QuizEngine, interval: float):
        while engine.is_running:
            await asyncio.sleep(interval)
            engine.tick()
        logger.debug(f"Clock stopped for session {engine.session_id}", status=engine.status.value)

    def register_task(self, session_id: str, task: asyncio.Task):
        """Register a new task for a session, cancelling any existing one."""
        self.cancel_task(session_id)
        self._tasks[session_id] = task
        logger.debug(f"Registered new task for session {session_id}")

        # Add callback to remove from dict when done
        task.add_done_callback(lambda t: self._cleanup_task(session_id, t))

    def cancel_task(self, session_id: str):
        """Cancel the active task for a session if it exists."""
        if session_id in self._tasks:
            task = self._tasks[session_id]
            if not task.done():
                task.cancel()
                logger.debug(f"Cancelled active task for session {session_id}")
            del self._tasks[session_id]

    def has_task(self, session_id: str) -> bool:
        return session_id in self._tasks

    def _cleanup_task(self, session_id: str, task: asyncio.Task):
        """Remove task from dict if it's still the registered one."""
        if session_id in self._tasks and self._tasks[session_id] == task:
            del self._tasks[session_id]

task_manager = TaskManager()
