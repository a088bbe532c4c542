import base64

from httpx import Headers

from ._request_spec import RequestSpec
from .constants import (
    AUTHORIZATION_BASIC_PREFIX,
    AUTHORIZATION_TOKEN_PREFIX,
    HEADER_AUTHORIZATION,
)


def encode_basic_auth(user_name: str, password: str) -> str:
    credentials = f"{user_name}:{password}".encode("utf-8")
    return base64.b64encode(credentials).decode("ascii")


def apply_auth_headers(headers: Headers, spec: RequestSpec) -> None:
    """Set the Authorization header from the spec.

    Every configured mechanism is applied in turn and overwrites the previous
    one: token, then user name and password, then the pre-encoded basic auth.
    """
    if spec.auth_token:
        headers[HEADER_AUTHORIZATION] = f"{AUTHORIZATION_TOKEN_PREFIX} {spec.auth_token}"

    if spec.auth_user_name and spec.auth_password:
        encoded = encode_basic_auth(spec.auth_user_name, spec.auth_password)
        headers[HEADER_AUTHORIZATION] = f"{AUTHORIZATION_BASIC_PREFIX} {encoded}"

    if spec.basic_auth:
        headers[HEADER_AUTHORIZATION] = f"{AUTHORIZATION_BASIC_PREFIX} {spec.basic_auth}"
