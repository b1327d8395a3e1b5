"""Immutable run settings."""

from dataclasses import dataclass

from .errors import ConfigError

MILLIS_PER_MINUTE = 60 * 1000


@dataclass(frozen=True)
class Settings:
    """Phase durations in milliseconds and the number of work cycles per set."""

    work_duration_ms: int
    short_break_ms: int
    long_break_ms: int
    cycles_per_set: int
    dark_mode: bool = False

    @classmethod
    def from_minutes(
        cls,
        work: int = 25,
        short_break: int = 5,
        long_break: int = 20,
        cycles: int = 4,
        dark_mode: bool = False,
    ) -> "Settings":
        """Build settings from minute values.

        Raises:
            ConfigError: If any duration or the cycle count is not positive.
        """
        values = {
            "work": work,
            "short break": short_break,
            "long break": long_break,
            "cycles": cycles,
        }
        for name, value in values.items():
            if value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value}")

        return cls(
            work_duration_ms=work * MILLIS_PER_MINUTE,
            short_break_ms=short_break * MILLIS_PER_MINUTE,
            long_break_ms=long_break * MILLIS_PER_MINUTE,
            cycles_per_set=cycles,
            dark_mode=dark_mode,
        )
