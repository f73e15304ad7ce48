from studyhive.app.services.pomodoro import (
    COMPLETED,
    IDLE,
    PAUSED,
    PRESETS,
    RUNNING,
    PomodoroTimer,
    format_time,
    pomodoro_xp,
)


def test_pomodoro_xp_is_minutes_with_a_floor_of_ten():
    assert pomodoro_xp(25 * 60) == 25
    assert pomodoro_xp(5 * 60) == 10
    assert pomodoro_xp(59) == 10
    assert pomodoro_xp(15 * 60 + 59) == 15


def test_format_time():
    assert format_time(25 * 60) == "25:00"
    assert format_time(61) == "01:01"
    assert format_time(0) == "00:00"


def test_idle_timer_does_not_count_down():
    timer = PomodoroTimer(60)
    assert timer.tick(30) == 0
    assert timer.remaining == 60
    assert timer.state == IDLE


def test_pause_and_resume():
    timer = PomodoroTimer(60)
    timer.start()
    timer.tick(10)
    timer.pause()
    assert timer.state == PAUSED
    timer.tick(10)
    assert timer.remaining == 50
    timer.toggle()
    assert timer.state == RUNNING
    timer.tick(10)
    assert timer.remaining == 40


def test_completion_awards_exactly_once():
    timer = PomodoroTimer(PRESETS["focus"])
    timer.start()

    awarded = [timer.tick(60) for _ in range(30)]

    assert sum(awarded) == 25
    assert awarded.count(25) == 1
    assert timer.state == COMPLETED
    assert timer.remaining == 0
    assert timer.completed_count == 1
    assert timer.xp_earned == 25


def test_overshooting_tick_completes_once():
    timer = PomodoroTimer(5 * 60)
    timer.start()
    assert timer.tick(10_000) == 10
    assert timer.tick(1) == 0
    timer.start()
    assert timer.tick(1) == 0


def test_reset_before_completion_discards_without_award():
    timer = PomodoroTimer(60)
    timer.start()
    timer.tick(59)
    timer.reset()

    assert timer.state == IDLE
    assert timer.remaining == 60
    assert timer.xp_earned == 0
    assert timer.completed_count == 0


def test_set_duration_clears_completion_and_allows_new_run():
    timer = PomodoroTimer(60)
    timer.start()
    timer.tick(60)
    assert timer.completed

    timer.set_duration(PRESETS["short_break"])
    assert not timer.completed
    assert timer.state == IDLE
    assert timer.display == "05:00"

    timer.start()
    assert timer.tick(300) == 10
    assert timer.completed_count == 2
    assert timer.xp_earned == 20
