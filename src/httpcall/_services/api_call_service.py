import re
import time
from typing import Any, Optional, Type, TypeVar

from httpx import (
    URL,
    Client,
    InvalidURL,
    Request,
    Response,
    Timeout,
    TimeoutException,
    TooManyRedirects,
)

from .._config import Config
from .._utils import (
    ContentType,
    RequestSpec,
    apply_auth_headers,
    decode_response,
    encode_body,
    handle_transport_errors,
    status_error,
    transient_retrying,
)
from .._utils.constants import HEADER_CONTENT_TYPE, HEADER_HOST
from ..models.errors import RequestCreationError, URLParsingError
from ._base_service import BaseService

T = TypeVar("T")

# RFC 7230 token
_METHOD_TOKEN = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z-]+")


class ApiCallService(BaseService):
    """Service executing outbound calls described by a :class:`RequestSpec`.

    Three entry points build on each other: :meth:`request_raw` performs one
    call and returns the body of a 200 response, :meth:`request` decodes that
    body into a target type and :meth:`request_with_retries` repeats
    :meth:`request` while the failure is transient.

    Every failure is raised as a subclass of
    :class:`~httpcall.models.errors.HttpCallError`, logged once where it is
    detected.
    """

    def __init__(self, config: Config, client: Optional[Client] = None) -> None:
        super().__init__(config=config, client=client)

    def request_raw(self, spec: RequestSpec) -> bytes:
        """Execute the call once and return the raw body of a 200 response.

        Args:
            spec (RequestSpec): Description of the call.

        Returns:
            bytes: The response body.

        Raises:
            JSONSerializationError: If a JSON body cannot be serialized.
            FormSerializationError: If a form body cannot be serialized.
            URLParsingError: If the endpoint is not a valid absolute URL.
            RequestCreationError: If the method is not a valid HTTP token or a
                header cannot be set.
            APIRequestError: On network failure, or when sending, redirects and
                reading the body together take longer than the timeout.
            APIRequestStatusError: If the status code is anything but 200.

        Examples:
            ```python
            from httpcall import HttpCall, RequestSpec

            spec = RequestSpec("https://api.example.com/items", "GET")
            spec.add_query_param("page", "2").set_auth_token("s3cr3t")

            with HttpCall() as http:
                raw = http.api.request_raw(spec)
            ```
        """
        content = encode_body(spec.body, spec.content_type)
        timeout = spec.timeout or self._config.default_timeout
        request = self._build_request(spec, content, timeout)
        description = spec.describe()
        url = str(request.url)
        deadline = time.monotonic() + timeout

        self._logger.debug(f"Request: {request.method} {url}")

        with handle_transport_errors(url, description):
            response = self._send(request, deadline)

        try:
            with handle_transport_errors(url, description):
                body = _read_before(response, deadline)
        finally:
            response.close()

        self._logger.debug(f"Response: {response.status_code} {url}")

        if response.status_code != 200:
            raise status_error(url, response, body, description)

        return body

    def request(self, spec: RequestSpec, target: Type[T] | Any) -> T:
        """Execute the call once and decode the JSON response into ``target``.

        Args:
            spec (RequestSpec): Description of the call.
            target: The shape to decode into, e.g. a pydantic model class or
                ``dict[str, Any]``.

        Returns:
            The decoded response.

        Raises:
            JSONDeserializationError: If the body does not decode into ``target``.
            HttpCallError: Any error raised by :meth:`request_raw`.
        """
        body = self.request_raw(spec)
        return decode_response(body, target, spec.describe())

    def request_with_retries(
        self, spec: RequestSpec, target: Type[T] | Any, retries: int
    ) -> T:
        """Like :meth:`request`, retrying transient failures immediately.

        The call is attempted up to ``retries + 1`` times. Only
        ``APIRequestError`` and ``APIRequestStatusError`` lead to another
        attempt; any other error, or success, ends the loop. When every
        attempt fails the error of the last one is raised.

        Args:
            spec (RequestSpec): Description of the call.
            target: The shape to decode into.
            retries (int): Extra attempts after the first one.

        Returns:
            The decoded response.
        """
        return transient_retrying(retries)(self.request, spec, target)

    def request_raw_with_retries(self, spec: RequestSpec, retries: int) -> bytes:
        """Like :meth:`request_raw`, with the retry policy of :meth:`request_with_retries`."""
        return transient_retrying(retries)(self.request_raw, spec)

    def _build_request(
        self, spec: RequestSpec, content: Optional[bytes], timeout: float
    ) -> Request:
        try:
            url = URL(spec.endpoint)
        except (InvalidURL, TypeError) as e:
            error = URLParsingError(f"url: {spec.endpoint}; error: {e}")
            error.log()
            raise error from e
        if not url.is_absolute_url:
            error = URLParsingError(
                f"url: {spec.endpoint}; error: endpoint must be an absolute URL"
            )
            error.log()
            raise error

        # Keys already in the endpoint's query keep their values.
        for key, value in (spec.query_params or {}).items():
            url = url.copy_add_param(key, value)

        method = spec.method or "GET"

        try:
            if not isinstance(method, str) or not _METHOD_TOKEN.fullmatch(method):
                raise ValueError(f"invalid method {method!r}")

            request = self._client.build_request(
                method, url, content=content, timeout=Timeout(timeout)
            )

            request.headers[HEADER_CONTENT_TYPE] = _content_type_value(
                spec.content_type
            )
            apply_auth_headers(request.headers, spec)

            if spec.host:
                request.headers[HEADER_HOST] = spec.host

            for key, value in (spec.custom_headers or {}).items():
                request.headers[key] = value
        except (ValueError, TypeError, AttributeError) as e:
            error = RequestCreationError(f"url: {url}; error: {e}")
            error.log()
            raise error from e

        return request

    def _send(self, request: Request, deadline: float) -> Response:
        """Send the request, following redirects within the call's deadline."""
        response = self._client.send(request, stream=True, follow_redirects=False)
        redirects = 0
        while response.next_request is not None:
            next_request = response.next_request
            response.close()

            redirects += 1
            if redirects > self._client.max_redirects:
                raise TooManyRedirects(
                    "Exceeded maximum allowed redirects.", request=next_request
                )

            remaining = _remaining(next_request, deadline)
            next_request.extensions["timeout"] = Timeout(remaining).as_dict()
            response = self._client.send(
                next_request, stream=True, follow_redirects=False
            )
        return response


def _remaining(request: Request, deadline: float) -> float:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise TimeoutException("Call exceeded its deadline.", request=request)
    return remaining


def _read_before(response: Response, deadline: float) -> bytes:
    """Read the whole body, failing as soon as the deadline has passed."""
    request = response.request
    # The transport picks the read timeout up when the body starts streaming.
    timeouts = dict(request.extensions.get("timeout", {}))
    timeouts["read"] = _remaining(request, deadline)
    request.extensions["timeout"] = timeouts

    chunks = []
    for chunk in response.iter_bytes():
        chunks.append(chunk)
        _remaining(request, deadline)
    return b"".join(chunks)


def _content_type_value(content_type: ContentType | str) -> str:
    if isinstance(content_type, ContentType):
        return content_type.value
    return str(content_type)
