# studyhive/app/services/pomodoro.py

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
COMPLETED = "completed"

PRESETS = {
    "focus": 25 * 60,
    "short_break": 5 * 60,
    "long_break": 15 * 60,
}


def pomodoro_xp(duration_seconds: int) -> int:
    """
    XP for a finished timer: one per full minute, never less than 10.
    Separate from the study-session rule on the server.
    """
    return max(duration_seconds // 60, 10)


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(seconds, 0), 60)
    return f"{mins:02d}:{secs:02d}"


class PomodoroTimer:
    """
    idle -> running <-> paused -> completed

    The owner drives the countdown by calling tick(). Completion awards XP
    once; further ticks, or a tick that overshoots zero, award nothing more.
    reset() and set_duration() drop the current run without an award.
    """

    def __init__(self, duration: int = PRESETS["focus"]):
        self.duration = duration
        self.remaining = duration
        self.state = IDLE
        self.completed = False
        self.completed_count = 0
        self.xp_earned = 0

    def start(self):
        if self.state in (IDLE, PAUSED):
            self.state = RUNNING

    def pause(self):
        if self.state == RUNNING:
            self.state = PAUSED

    def toggle(self):
        if self.state == RUNNING:
            self.pause()
        else:
            self.start()

    def reset(self):
        self.remaining = self.duration
        self.state = IDLE
        self.completed = False

    def set_duration(self, seconds: int):
        self.duration = seconds
        self.reset()

    def tick(self, seconds: int = 1) -> int:
        """
        Advances a running timer. Returns the XP awarded by this tick.
        """
        if self.state != RUNNING:
            return 0
        self.remaining = max(self.remaining - seconds, 0)
        if self.remaining > 0 or self.completed:
            return 0

        self.completed = True
        self.state = COMPLETED
        award = pomodoro_xp(self.duration)
        self.completed_count += 1
        self.xp_earned += award
        return award

    @property
    def display(self) -> str:
        return format_time(self.remaining)
