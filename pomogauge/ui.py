"""Textual-based UI for the Pomodoro timer."""

import logging

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.color import Color
from textual.timer import Timer
from textual.widget import Widget

from .clock import Clock, system_clock
from .errors import TerminalError
from .scheduler import TimerSession

logger = logging.getLogger(__name__)

TICK_SECONDS = 0.5

DARK_BACKGROUND = Color(0, 0, 0)
LIGHT_BACKGROUND = Color(255, 255, 255)


def render_gauge(
    width: int,
    height: int,
    ratio: float,
    label: str,
    color: Color,
    background: Color,
) -> Text:
    """Render a filled bar covering width x height cells.

    The leftmost ``ratio`` share of every row is painted in ``color`` and the
    rest in ``background``. The label is centred on the middle row and takes
    the opposite color of the cell under it.
    """
    ratio = min(max(ratio, 0.0), 1.0)
    width = max(width, 0)
    height = max(height, 1)

    filled = int(ratio * width)
    label = label[:width]
    label_start = (width - len(label)) // 2
    label_row = height // 2

    filled_style = Style(color=background.rich_color, bgcolor=color.rich_color)
    empty_style = Style(color=color.rich_color, bgcolor=background.rich_color)

    text = Text(no_wrap=True, end="")
    for row in range(height):
        if row == label_row:
            line = " " * label_start + label
            line += " " * (width - len(line))
        else:
            line = " " * width
        text.append(line[:filled], style=filled_style)
        text.append(line[filled:], style=empty_style)
        if row < height - 1:
            text.append("\n")
    return text


class Gauge(Widget):
    """Full-screen progress gauge with the session label on top."""

    DEFAULT_CSS = """
    Gauge {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, session: TimerSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session

    def render(self) -> Text:
        if self.session.settings.dark_mode:
            background = DARK_BACKGROUND
        else:
            background = LIGHT_BACKGROUND
        return render_gauge(
            self.size.width,
            self.size.height,
            self.session.progress_ratio(),
            self.session.display_text(),
            self.session.display_color(),
            background,
        )


class PomodoroApp(App):
    """Pomodoro timer application."""

    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("s", "start", "Start"),
        Binding("p", "toggle_pause", "Pause/Resume"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, session: TimerSession, clock: Clock = system_clock) -> None:
        super().__init__()
        self.session = session
        self.clock = clock
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Gauge(self.session, id="gauge")

    def on_mount(self) -> None:
        self._tick_timer = self.set_interval(TICK_SECONDS, self._tick)

    def _tick(self) -> None:
        """Called every half second."""
        self.session.advance(self.clock())
        self._refresh_display()

    def _refresh_display(self) -> None:
        self.query_one("#gauge", Gauge).refresh()

    def action_start(self) -> None:
        """Start a new set of cycles."""
        self.session.start()
        self._refresh_display()

    def action_toggle_pause(self) -> None:
        """Pause or resume the countdown."""
        self.session.toggle_pause()
        self._refresh_display()


def run_ui(session: TimerSession, clock: Clock = system_clock) -> int:
    """Run the Pomodoro UI until the user quits.

    Textual switches to the alternate screen on start and restores the
    terminal before returning, including when the app fails.

    Args:
        session: The timer session to drive.
        clock: Source of millisecond readings passed to ``advance``.

    Returns:
        The app's exit code.

    Raises:
        TerminalError: If reading from or writing to the terminal failed.
    """
    app = PomodoroApp(session, clock)
    try:
        app.run()
    except OSError as exc:
        raise TerminalError(f"terminal I/O failed: {exc}") from exc
    logger.info("Quit")
    return app.return_code or 0
