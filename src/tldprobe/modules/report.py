"""Console and file reporting of probe results."""

from __future__ import annotations

import logging
import threading
from typing import TextIO

from rich.console import Console
from rich.text import Text

from .probe import DisplayOptions, ProbeResult

logger = logging.getLogger(__name__)


def result_segments(result: ProbeResult, display: DisplayOptions) -> list[tuple[str, str]]:
    """Return the bracketed ``(text, style)`` segments for one result."""
    if not result.active:
        segments = [("[Not Active]", "red")]
        if display.status_code and result.status_code is not None:
            segments.append((f"[Status Code:{result.status_code}]", "magenta"))
        return segments

    segments = [("[Active]", "green")]
    if display.ip:
        segments.append((f"[IP:{result.ip or ''}]", "yellow"))
    if display.status_code:
        segments.append((f"[Status Code:{result.status_code}]", "magenta"))
    if display.title:
        segments.append((f"[Title:{result.title or ''}]", "green"))
    if display.location:
        segments.append((f"[Location:{result.location or ''}]", "blue"))
    if display.favicon:
        segments.append((f"[Favicon Hash:{result.favicon_hash or ''}]", ""))
    return segments


def format_result_line(result: ProbeResult, display: DisplayOptions) -> str:
    """Plain-text line for a result, as written to the output file."""
    return " ".join([result.domain, *(text for text, _ in result_segments(result, display))])


class ResultReporter:
    """Writes each result to the console and the optional output files.

    Calls to :meth:`report` are serialized so lines from concurrent workers
    never interleave. Inactive results are only reported in verbose mode.
    """

    def __init__(
        self,
        console: Console,
        display: DisplayOptions,
        verbose: bool = False,
        output: TextIO | None = None,
        ip_output: TextIO | None = None,
    ):
        self.console = console
        self.display = display
        self.verbose = verbose
        self.output = output
        self.ip_output = ip_output
        self._lock = threading.Lock()

    def report(self, result: ProbeResult) -> None:
        """Report one probe result."""
        if not (result.active or self.verbose):
            return

        with self._lock:
            self.console.print(self._render(result), highlight=False, soft_wrap=True)
            if self.output is not None:
                line = format_result_line(result, self.display)
                self._write(self.output, f"{line}\n", "output file")
            if self.ip_output is not None and result.active and result.ip is not None:
                self._write(self.ip_output, f"{result.ip}\n", "IP output file")

    def _render(self, result: ProbeResult) -> Text:
        text = Text(result.domain)
        for segment, style in result_segments(result, self.display):
            text.append(" ")
            text.append(segment, style=style or None)
        return text

    def _write(self, sink: TextIO, line: str, label: str) -> None:
        try:
            sink.write(line)
        except OSError as exc:
            logger.error("Error writing to %s: %s", label, exc)
