"""Console handler with severity-banded output channels"""

import sys
import traceback
from typing import Optional, TextIO

from logged.core.log_level import LogLevel
from logged.core.log_record import LogRecord
from logged.formatters.base_formatter import BaseFormatter
from logged.formatters.template_formatter import SimpleFormatter
from logged.handlers.base_handler import BaseHandler


class ConsoleHandler(BaseHandler):
    """
    Write records to the console.

    Severity bands map to channels:
        below DEBUG  -> trace  (stderr, followed by the call stack)
        below INFO   -> debug  (stdout)
        below WARN   -> info   (stdout)
        below ERROR  -> warn   (stderr)
        otherwise    -> error  (stderr)
    """

    CHANNEL_STREAMS = {
        "trace": "stderr",
        "debug": "stdout",
        "info": "stdout",
        "warn": "stderr",
        "error": "stderr",
    }

    def __init__(
        self,
        level: int = LogLevel.INFO,
        fmt: Optional[str] = None,
        date_format: Optional[str] = None,
        formatter: Optional[BaseFormatter] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """
        Initialize console handler.

        Args:
            level: Minimum severity written
            fmt: Template; builds a dedicated SimpleFormatter when given
            date_format: Date pattern; builds a dedicated SimpleFormatter when given
            formatter: Formatter instance (default: the registry's default formatter)
            stdout: Stream for debug/info output (default: sys.stdout)
            stderr: Stream for trace/warn/error output (default: sys.stderr)
        """
        if formatter is None and (fmt or date_format):
            formatter = SimpleFormatter(fmt, date_format)
        super().__init__(level, formatter)
        self._stdout = stdout
        self._stderr = stderr

    @staticmethod
    def channel_for(level: int) -> str:
        """Name of the output channel for a severity."""
        if level < LogLevel.DEBUG:
            return "trace"
        if level < LogLevel.INFO:
            return "debug"
        if level < LogLevel.WARN:
            return "info"
        if level < LogLevel.ERROR:
            return "warn"
        return "error"

    def emit(self, text: str, record: LogRecord) -> None:
        channel = self.channel_for(record.level)
        stream = self._stream(self.CHANNEL_STREAMS[channel])
        if channel == "trace":
            # Records built by a logger carry the caller's stack
            stack = record.stack or "".join(traceback.format_stack()[:-1]).rstrip("\n")
            text = "Trace: " + text + "\n" + stack
        stream.write(text + "\n")
        stream.flush()

    def _stream(self, name: str) -> TextIO:
        if name == "stdout":
            return self._stdout or sys.stdout
        return self._stderr or sys.stderr

    def flush(self):
        """Flush streams."""
        self._stream("stdout").flush()
        self._stream("stderr").flush()
