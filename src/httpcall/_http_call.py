from types import TracebackType
from typing import Optional

from httpx import Client

from ._config import Config
from ._services import ApiCallService
from ._utils import setup_logging


class HttpCall:
    """Entry point wiring configuration, logging and the HTTP client together.

    Examples:
        ```python
        from httpcall import HttpCall, RequestSpec

        with HttpCall(default_timeout=10) as http:
            spec = RequestSpec("https://api.example.com/users", "POST")
            spec.set_body({"name": "ada"})
            user = http.api.request_with_retries(spec, dict, retries=2)
        ```
    """

    def __init__(
        self,
        *,
        default_timeout: Optional[float] = None,
        debug: Optional[bool] = None,
        client: Optional[Client] = None,
    ) -> None:
        self._config = Config.from_env(default_timeout=default_timeout, debug=debug)

        setup_logging(self._config.debug)

        self._api = ApiCallService(self._config, client=client)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def api(self) -> ApiCallService:
        return self._api

    def close(self) -> None:
        self._api.close()

    def __enter__(self) -> "HttpCall":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
