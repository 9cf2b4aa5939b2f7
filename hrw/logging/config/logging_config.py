import threading
from typing import List, Literal

from hrw.logging.models import LogLevel, LogLevelName
from .stream_type import StreamType


LogOutput = Literal["stdout", "stderr"]
LogFormat = Literal["text", "json"]

_global_lock = threading.Lock()
_global_settings = {
    "log_level": LogLevel.INFO,
    "log_output_type": StreamType.STDERR,
    "log_format": "text",
    "disabled_loggers": (),
}


class LoggingConfig:
    """
    Process-wide logging settings.

    Settings live in module state shared by every thread, so a level set
    on the main thread also applies to rankers called from worker threads.
    Writes hold a lock; reads see a consistent value for each setting.
    """

    def __init__(self) -> None:
        self._settings = _global_settings
        self._lock = _global_lock

    def update(
        self,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
        log_format: LogFormat | None = None,
    ):
        with self._lock:
            if log_level:
                self._settings["log_level"] = LogLevel.to_level(log_level)

            if log_output:
                self._settings["log_output_type"] = (
                    StreamType.STDOUT if log_output == "stdout" else StreamType.STDERR
                )

            if log_format:
                self._settings["log_format"] = log_format

    def disable(self, logger_name: str):
        with self._lock:
            disabled_loggers = self._settings["disabled_loggers"]
            if logger_name not in disabled_loggers:
                self._settings["disabled_loggers"] = (*disabled_loggers, logger_name)

    def enable(self, logger_name: str):
        with self._lock:
            self._settings["disabled_loggers"] = tuple(
                name
                for name in self._settings["disabled_loggers"]
                if name != logger_name
            )

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        return (
            log_level.severity >= self.level.severity
            and logger_name not in self._settings["disabled_loggers"]
        )

    @property
    def level(self) -> LogLevel:
        return self._settings["log_level"]

    @property
    def output(self) -> StreamType:
        return self._settings["log_output_type"]

    @property
    def format(self) -> LogFormat:
        return self._settings["log_format"]

    @property
    def disabled_loggers(self) -> List[str]:
        return list(self._settings["disabled_loggers"])
