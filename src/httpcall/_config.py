from os import environ as env
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import DEFAULT_TIMEOUT_SECONDS, ENV_DEBUG, ENV_DEFAULT_TIMEOUT

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    default_timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    debug: bool = False

    @classmethod
    def from_env(
        cls,
        *,
        default_timeout: Optional[float] = None,
        debug: Optional[bool] = None,
    ) -> "Config":
        """Build the configuration from explicit values, then the environment.

        A ``.env`` file in the working directory is loaded first. Explicit
        arguments win over ``HTTPCALL_DEFAULT_TIMEOUT`` and ``HTTPCALL_DEBUG``.
        """
        load_dotenv(find_dotenv(usecwd=True))

        values: dict[str, object] = {}
        timeout_value = default_timeout
        if timeout_value is None:
            timeout_value = env.get(ENV_DEFAULT_TIMEOUT)  # type: ignore
        if timeout_value is not None:
            values["default_timeout"] = timeout_value

        if debug is not None:
            values["debug"] = debug
        elif env.get(ENV_DEBUG):
            values["debug"] = env[ENV_DEBUG].strip().lower() in _TRUTHY

        return cls.model_validate(values)
