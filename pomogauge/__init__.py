"""Terminal Pomodoro timer drawn as a single full-screen gauge."""

__version__ = "0.1.0"
