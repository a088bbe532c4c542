import json
from contextlib import contextmanager
from typing import Dict, Generator, Optional

import httpx

from ..models.errors import APIRequestError, APIRequestStatusError


@contextmanager
def handle_transport_errors(url: str, request: str) -> Generator[None, None, None]:
    """Context manager converting httpx transport failures into APIRequestError.

    Connection failures, timeouts and protocol errors raised while sending the
    request or reading the response are classified, logged and re-raised.

    Args:
        url: The URL being called, used in the error message.
        request: Description of the request, attached as context.

    Raises:
        APIRequestError: For any ``httpx.RequestError``.
    """
    try:
        yield
    except httpx.RequestError as e:
        error = APIRequestError(f"url: {url}; error: {e!r}")
        error.with_param("request", request)
        error.log()
        raise error from e


def parse_error_body(body: bytes) -> Optional[Dict[str, str]]:
    """Best-effort parse of an error response into a flat string map.

    Returns ``None`` when the body is not a JSON object. Entries whose value
    is not a string are left out.
    """
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    if not isinstance(parsed, dict):
        return None
    return {
        key: value for key, value in parsed.items() if isinstance(value, str)
    }


def status_error(
    url: str, response: httpx.Response, body: bytes, request: str
) -> APIRequestStatusError:
    """Build and log the error for a response whose status is not 200."""
    response_json = parse_error_body(body)
    error = APIRequestStatusError(
        f"url: {url}; status code: {response.status_code}; "
        f"status: {response.reason_phrase}; body: {response_json}",
        status_code=response.status_code,
    )
    error.with_param("response", body.decode("utf-8", errors="replace"))
    error.with_param("request", request)
    if response_json is not None:
        error.with_param("response_json", response_json)
    error.log()
    return error
