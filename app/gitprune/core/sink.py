"""Report sink writing to the console and an append-only log file.

Every report line produced by a run is shown on the console and
appended to the run log with a timestamp prefix. The sink is created
once per CLI invocation and handed to each workflow.
"""

from datetime import datetime
from pathlib import Path

from rich.console import Console

from gitprune.core.paths import ensure_dir
from gitprune.core.theme import get_theme


class ReportSink:
    """Dual console and file writer for report lines.

    Log file lines have the form ``{timestamp}|{line}``. The file is
    only ever appended to; it is never read back or rotated.

    Attributes:
        log_path: Path of the append-only log file.
    """

    def __init__(self, console: Console, log_path: Path) -> None:
        """Initialize the sink.

        The gitprune theme is pushed onto the console so the report
        styles resolve on any console passed in.

        Args:
            console: Rich console for terminal output.
            log_path: Append-only log file. Parent directories are created.

        Raises:
            RuntimeError: If the log directory cannot be created.
        """
        self._console = console
        self._console.push_theme(get_theme())
        self._log_path = log_path
        ensure_dir(log_path.parent, "log")

    @property
    def log_path(self) -> Path:
        return self._log_path

    def write(self, line: str, style: str | None = None) -> None:
        """Record one report line.

        Args:
            line: Plain text; Rich markup is not interpreted.
            style: Optional theme style for the console rendering.

        Raises:
            OSError: If the log file cannot be written.
        """
        self._console.print(line, style=style, markup=False, highlight=False)
        timestamp = datetime.now().isoformat(sep=" ", timespec="seconds")
        with self._log_path.open(mode="a", encoding="utf-8") as f:
            f.write(f"{timestamp}|{line}\n")

    def separator(self) -> None:
        """Write the line that closes the report of one area."""
        self.write("-" * 83, style="border")
