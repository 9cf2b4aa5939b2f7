from typing import Any, Dict

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    message: str | None = None
    tags: set[str] = msgspec.field(
        default_factory=set,
    )
    level: LogLevel

    def fields(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.__struct_fields__}

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        values = self.fields()
        values["level"] = self.level.value

        if context:
            values.update(context)

        return template.format(**values)
