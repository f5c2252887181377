"""Terminal output for watch lines."""

from rich.console import Console
from rich.text import Text

from ..models import LineType, OutputLine

CLOCK_FORMAT = "%I:%M:%S %p"
SUBJECT_WIDTH = 24
# Tab stop width for the tab before the detail
TAB_SIZE = 8
REPLY_MARKER = "`- reply to"

KIND_STYLES = {
    "instance-exited": "red",
    "heartbeat": "cyan",
    "route-registered": "green",
    "route-unregistered": "yellow",
    "instance-start": "green",
    "droplet-updated": "blue",
    "instance-stop": "red",
    "instance-update": "blue",
    "droplet-query": "magenta",
    "health-query": "magenta",
}


def render_plain(line: OutputLine) -> str:
    """Render a line as uncolored text, keeping the tab before the detail."""
    return render_text(line).plain


def render_text(line: OutputLine) -> Text:
    """Render a line as rich Text with per-part styles."""
    text = Text(tab_size=TAB_SIZE)

    if line.line_type == LineType.DIAGNOSTIC:
        text.append(line.detail, style="bold red")
        return text

    text.append(line.timestamp.strftime(CLOCK_FORMAT), style="dim")
    style = KIND_STYLES.get(line.kind)

    if line.line_type == LineType.REPLY:
        text.append(f"   {REPLY_MARKER} ", style="dim")
        text.append(line.subject, style=style)
    else:
        text.append(" ")
        text.append(line.subject.ljust(SUBJECT_WIDTH), style=style)

    if line.sequence is not None:
        text.append(" (")
        text.append(str(line.sequence), style="bold")
        text.append(")")

    text.append("\t")
    text.append(line.detail)
    return text


class OutputRouter:
    """Writes watch lines to the terminal through a rich Console."""

    def __init__(self, console: Console | None = None, color: bool = True):
        self._console = console or Console(no_color=not color, highlight=False)

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, line: OutputLine) -> None:
        """Write one line; the tab before the detail prints as spaces."""
        self._console.print(render_text(line), soft_wrap=True, highlight=False)


class ListSink:
    """Collects watch lines in memory."""

    def __init__(self):
        self.lines: list[OutputLine] = []

    def emit(self, line: OutputLine) -> None:
        """Append one line."""
        self.lines.append(line)

    def plain(self) -> list[str]:
        """All collected lines as uncolored text."""
        return [render_plain(line) for line in self.lines]
