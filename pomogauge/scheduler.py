"""Pure logic for the Pomodoro timer state machine."""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from textual.color import Color

from .clock import Clock, convert_millis_to_time, system_clock
from .errors import InconsistentStateError
from .settings import Settings

logger = logging.getLogger(__name__)

IDLE_TEXT = "Press 's' to start, 'q' to quit, 'p' to pause"
PAUSED_TEXT = "PAUSED"

NEUTRAL_COLOR = Color(128, 128, 128)
SHORT_BREAK_COLOR = Color(173, 216, 230)
LONG_BREAK_COLOR = Color(144, 238, 144)


@dataclass(frozen=True)
class Idle:
    """No timer running; the start prompt is shown."""


@dataclass(frozen=True)
class Working:
    remaining_ms: int
    cycles_remaining: int


@dataclass(frozen=True)
class ShortBreak:
    remaining_ms: int
    cycles_remaining: int


@dataclass(frozen=True)
class LongBreak:
    remaining_ms: int
    cycles_remaining: int


Phase = Union[Idle, Working, ShortBreak, LongBreak]

PHASE_LABELS = {
    Idle: "Idle",
    Working: "Work",
    ShortBreak: "Short break",
    LongBreak: "Long break",
}


class TimerSession:
    """Pomodoro timer state machine.

    Counts the current phase down from wall-clock readings passed to
    ``advance`` and moves through work, short break and long break phases.
    The number of work cycles left in the set travels inside the phase
    value, so a running phase can never be missing it.
    """

    def __init__(self, settings: Settings, clock: Clock = system_clock):
        """Initialize an idle session.

        Args:
            settings: Phase durations and cycles per set.
            clock: Callable returning the current time in milliseconds.
        """
        self.settings = settings
        self.clock = clock

        self.phase: Phase = Idle()
        self.paused = False
        self.last_observed_time_ms = clock()

    @property
    def cycles_remaining(self) -> Optional[int]:
        """Work cycles left in the set, or None while idle."""
        if isinstance(self.phase, Idle):
            return None
        return self.phase.cycles_remaining

    @property
    def remaining_ms(self) -> Optional[int]:
        """Milliseconds left in the current phase, or None while idle."""
        if isinstance(self.phase, Idle):
            return None
        return self.phase.remaining_ms

    @property
    def phase_label(self) -> str:
        """Human-readable phase label."""
        return PHASE_LABELS[type(self.phase)]

    @property
    def cycle_display(self) -> str:
        """Display string for the cycle counter (e.g. '2/4')."""
        total = self.settings.cycles_per_set
        if self.cycles_remaining is None:
            return f"0/{total}"
        return f"{total - self.cycles_remaining + 1}/{total}"

    def phase_total_ms(self) -> int:
        """Configured duration of the current phase in milliseconds."""
        if isinstance(self.phase, Working):
            return self.settings.work_duration_ms
        elif isinstance(self.phase, ShortBreak):
            return self.settings.short_break_ms
        elif isinstance(self.phase, LongBreak):
            return self.settings.long_break_ms
        return 0

    def start(self) -> None:
        """Begin a fresh set of work cycles, dropping any progress."""
        self.phase = Working(
            remaining_ms=self.settings.work_duration_ms,
            cycles_remaining=self.settings.cycles_per_set,
        )
        self.last_observed_time_ms = self.clock()
        logger.info("Session started with %d cycles", self.settings.cycles_per_set)

    def toggle_pause(self) -> None:
        """Toggle between running and paused."""
        self.paused = not self.paused
        logger.info("Timer %s", "paused" if self.paused else "resumed")

    def advance(self, now_ms: int) -> bool:
        """Apply the time elapsed since the previous reading.

        The clock reading is always recorded, so time spent paused or idle is
        never charged to the phase later. Time overshooting the end of a
        phase is dropped: the next phase starts at its full duration.

        Args:
            now_ms: Current clock reading in milliseconds.

        Returns:
            True if the phase changed, False otherwise.
        """
        delta = now_ms - self.last_observed_time_ms
        self.last_observed_time_ms = now_ms

        if self.paused or isinstance(self.phase, Idle):
            return False

        new_remaining = self.phase.remaining_ms - delta
        if new_remaining > 0:
            self.phase = replace(self.phase, remaining_ms=new_remaining)
            return False

        old_label = self.phase_label
        self.phase = self._next_phase(self.phase)
        logger.info(
            "%s finished, now %s (%d cycles remaining)",
            old_label,
            self.phase_label,
            self.phase.cycles_remaining,
        )
        return True

    def _next_phase(self, phase: Phase) -> Phase:
        """Determine the phase that follows an exhausted one."""
        settings = self.settings
        if isinstance(phase, Working) and phase.cycles_remaining >= 1:
            if phase.cycles_remaining == 1:
                return LongBreak(settings.long_break_ms, phase.cycles_remaining)
            return ShortBreak(settings.short_break_ms, phase.cycles_remaining)
        elif isinstance(phase, ShortBreak) and phase.cycles_remaining > 1:
            return Working(settings.work_duration_ms, phase.cycles_remaining - 1)
        elif isinstance(phase, LongBreak):
            return Working(settings.work_duration_ms, settings.cycles_per_set)

        raise InconsistentStateError(f"no transition out of {phase!r}")

    def display_text(self) -> str:
        """Label drawn over the gauge."""
        if self.paused:
            return PAUSED_TEXT

        phase = self.phase
        if isinstance(phase, Idle):
            return IDLE_TEXT

        text = f"{self.phase_label}: {convert_millis_to_time(phase.remaining_ms)}"
        if isinstance(phase, LongBreak):
            return text
        return f"{text} - Cycle {self.cycle_display}"

    def progress_ratio(self) -> float:
        """Fraction of the current phase still remaining."""
        if self.paused:
            return 1.0
        if isinstance(self.phase, Idle):
            return 0.0
        return self.phase.remaining_ms / self.phase_total_ms()

    def display_color(self) -> Color:
        """Gauge color for the current phase.

        Work fades from green to red as the phase runs down.
        """
        if isinstance(self.phase, Working):
            ratio = min(max(self.progress_ratio(), 0.0), 1.0)
            green = int(ratio * 255)
            return Color(255 - green, green, 0)
        elif isinstance(self.phase, ShortBreak):
            return SHORT_BREAK_COLOR
        elif isinstance(self.phase, LongBreak):
            return LONG_BREAK_COLOR
        return NEUTRAL_COLOR
