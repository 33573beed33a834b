from services.timer_service import CountdownClock, ElapsedClock, TimerController


def test_countdown_fires_once():
    clock = CountdownClock(3)
    assert [clock.tick() for _ in range(5)] == [False, False, True, False, False]
    assert clock.remaining == 0
    assert clock.expired


def test_countdown_reset_restarts():
    clock = CountdownClock(2)
    clock.tick()
    clock.tick()
    clock.reset(5)
    assert clock.remaining == 5
    assert not clock.expired


def test_disabled_countdown_never_moves():
    clock = CountdownClock(2, enabled=False)
    assert not any(clock.tick() for _ in range(10))
    assert clock.remaining == 2


def test_elapsed_clock_stops():
    clock = ElapsedClock()
    clock.tick()
    clock.tick()
    clock.stop()
    clock.tick()
    assert clock.seconds == 2


def test_controller_ticks_both_clocks_together():
    timers = TimerController(question_limit=10)
    for _ in range(4):
        timers.tick()
    assert timers.elapsed_seconds == 4
    assert timers.remaining_seconds == 6
    assert timers.time_taken() == 4


def test_controller_can_hold_question_clock():
    timers = TimerController(question_limit=10)
    timers.tick(count_question=False)
    assert timers.elapsed_seconds == 1
    assert timers.remaining_seconds == 10


def test_controller_stop():
    timers = TimerController(question_limit=1)
    timers.stop()
    assert timers.tick() is False
    assert timers.elapsed_seconds == 0
    assert timers.remaining_seconds == 1
