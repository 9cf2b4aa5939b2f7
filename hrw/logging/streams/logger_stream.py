from __future__ import annotations

import datetime
import sys
import threading
from typing import Any, Callable, Dict, TextIO, TypeVar

import msgspec

from hrw.logging.config import LoggingConfig, StreamType
from hrw.logging.models import Entry, Log


T = TypeVar("T", bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    """
    Writes entries for one named logger to stdout or stderr.

    Level, output stream and format are read from LoggingConfig on every
    call, so reconfiguring logging takes effect for existing streams.
    Failures to render or write an entry are reported on stderr and never
    raised to the caller.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._config = LoggingConfig()

    @property
    def name(self) -> str:
        return self._name

    @property
    def template(self) -> str | None:
        return self._default_template

    def enabled(self, entry: Entry) -> bool:
        return self._config.enabled(self._name, entry.level)

    def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self.enabled(entry) is False:
            return

        if filter and filter(entry) is False:
            return

        filename, line_number, function_name = self._find_caller()
        context: Dict[str, Any] = {
            "filename": filename,
            "function_name": function_name,
            "line_number": line_number,
            "thread_id": threading.get_native_id(),
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
        }

        try:
            line = self._render(entry, context, template)
            stream = self._get_stream(self._config.output)
            stream.write(line + "\n")
            stream.flush()

        except (
            OSError,
            AttributeError,
            KeyError,
            IndexError,
            ValueError,
            TypeError,
            msgspec.EncodeError,
        ) as err:
            context["error"] = f"{type(err).__name__}: {err}"
            sys.stderr.write(
                entry.to_template(ERROR_TEMPLATE, context=context) + "\n"
            )

    def _render(
        self,
        entry: Entry,
        context: Dict[str, Any],
        template: str | None,
    ) -> str:
        if self._config.format == "json":
            return Log(
                entry=entry,
                logger=self._name,
                **context,
            ).to_json()

        if template is None:
            template = self._default_template or DEFAULT_TEMPLATE

        return entry.to_template(template, context=context)

    def _get_stream(self, stream_type: StreamType) -> TextIO:
        if stream_type == StreamType.STDOUT:
            return sys.stdout

        return sys.stderr

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
