from logging import getLogger
from types import TracebackType
from typing import Optional

from httpx import Client

from .._config import Config
from .._utils.constants import LOGGER_NAME


class BaseService:
    def __init__(self, config: Config, client: Optional[Client] = None) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        # A client handed in by the caller stays the caller's to close.
        self._owns_client = client is None
        self._client = client if client is not None else Client()

        self._logger.debug(f"CONFIG: {self._config.model_dump()}")

        super().__init__()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
