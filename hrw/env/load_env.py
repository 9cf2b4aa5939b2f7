import os
from typing import Callable, Dict, Mapping, TypeVar

from dotenv import dotenv_values
from pydantic import BaseModel

from .env import Env, PrimaryType

T = TypeVar("T", bound=BaseModel)


def _parse_known(
    source: Mapping[str, str | None],
    envars: Dict[str, Callable[[str], PrimaryType]],
) -> Dict[str, PrimaryType]:
    return {
        envar_name: envars[envar_name](envar_value)
        for envar_name, envar_value in source.items()
        if envar_name in envars and envar_value
    }


def load_env(
    default: type[Env] = Env,
    env_file: str | None = None,
    override: T | None = None,
) -> T:
    """
    Build an Env from a dotenv file and the process environment.

    Values from env_file (".env" by default) are read first and process
    environment variables replace them. Fields explicitly set on override
    win over both. Names not declared in the Env's types map are ignored.
    """
    envars = default.types_map()

    if env_file is None:
        env_file = ".env"

    values: Dict[str, PrimaryType] = {}

    if env_file and os.path.exists(env_file):
        values.update(
            _parse_known(dotenv_values(dotenv_path=env_file), envars)
        )

    values.update(_parse_known(os.environ, envars))

    if override:
        values.update(**override.model_dump(exclude_unset=True, exclude_none=True))

        return type(override)(**values)

    return default(**values)
