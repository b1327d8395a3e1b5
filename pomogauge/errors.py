"""Exceptions raised by the Pomodoro timer."""


class PomodoroError(Exception):
    """Base class for timer errors."""


class ConfigError(PomodoroError):
    """Startup settings are invalid."""


class TerminalError(PomodoroError):
    """The terminal could not be driven."""


class InconsistentStateError(PomodoroError):
    """The session reached a state it should never be in."""
