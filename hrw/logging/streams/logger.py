import threading
from typing import Dict

from .logger_stream import LoggerStream


class Logger:
    def __init__(self) -> None:
        self._streams: Dict[str, LoggerStream] = {}
        self._lock = threading.Lock()

    def __getitem__(self, name: str):
        with self._lock:
            if self._streams.get(name) is None:
                self._streams[name] = LoggerStream(name=name)

            return self._streams[name]

    def get_stream(
        self,
        name: str | None = None,
        template: str | None = None,
    ):
        if name is None:
            name = 'default'

        with self._lock:
            stream = self._streams.get(name)
            if stream is None or stream.template != template:
                stream = LoggerStream(
                    name=name,
                    template=template,
                )

                self._streams[name] = stream

            return stream
