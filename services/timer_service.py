"""
Session clocks.

Both clocks are passive counters: nothing here schedules itself. The owner
calls `TimerController.tick()` once per second so the two clocks always move
together (see services/task_manager.py for the asyncio driver).
"""


class ElapsedClock:
    """Count-up clock for the whole session. Never pauses, never resets."""

    def __init__(self):
        self.seconds = 0
        self.running = True

    def tick(self):
        if self.running:
            self.seconds += 1

    def stop(self):
        self.running = False


class CountdownClock:
    """Per-question count-down. Expires once; only `reset` restarts it."""

    def __init__(self, limit: int, enabled: bool = True):
        self.enabled = enabled
        self.limit = max(0, int(limit))
        self.remaining = self.limit

    def reset(self, limit: int):
        self.limit = max(0, int(limit))
        self.remaining = self.limit

    @property
    def expired(self) -> bool:
        return self.remaining == 0

    def tick(self) -> bool:
        """Decrement by one second. True only on the tick that reaches zero."""
        if not self.enabled or self.remaining == 0:
            return False
        self.remaining -= 1
        return self.remaining == 0


class TimerController:
    def __init__(self, question_limit: int, show_timer: bool = True):
        self.elapsed = ElapsedClock()
        self.countdown = CountdownClock(question_limit, enabled=show_timer)
        self.stopped = False

    @property
    def elapsed_seconds(self) -> int:
        return self.elapsed.seconds

    @property
    def remaining_seconds(self) -> int:
        return self.countdown.remaining

    def tick(self, count_question: bool = True) -> bool:
        """
        Advance both clocks by one second.

        Returns True when the per-question countdown expired on this tick.
        `count_question=False` holds the countdown while the global clock runs.
        """
        if self.stopped:
            return False
        self.elapsed.tick()
        if not count_question:
            return False
        return self.countdown.tick()

    def reset_question(self, limit: int):
        self.countdown.reset(limit)

    def time_taken(self) -> int:
        return max(0, self.countdown.limit - self.countdown.remaining)

    def stop(self):
        self.stopped = True
        self.elapsed.stop()
