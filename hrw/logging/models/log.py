import msgspec

from .entry import Entry


class Log(msgspec.Struct, kw_only=True):
    """An entry plus the call site and stream it was logged from."""
    entry: Entry
    logger: str
    filename: str
    function_name: str
    line_number: int
    thread_id: int
    timestamp: str

    def to_json(self) -> str:
        return msgspec.json.encode(self).decode()
