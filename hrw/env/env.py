from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictStr

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    HRW_LOG_LEVEL: Literal[
        "trace",
        "debug",
        "info",
        "warn",
        "error",
        "critical",
        "fatal",
    ] = "info"
    HRW_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    HRW_LOG_FORMAT: Literal["text", "json"] = "text"
    HRW_LOG_TEMPLATE: StrictStr | None = None
    HRW_TOP_N_SELECTION: Literal["heap", "sort"] = "heap"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "HRW_LOG_LEVEL": str,
            "HRW_LOG_OUTPUT": str,
            "HRW_LOG_FORMAT": str,
            "HRW_LOG_TEMPLATE": str,
            "HRW_TOP_N_SELECTION": str,
        }
