from enum import Enum
from logging import getLogger
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    URL_PARSING_ERROR = "URL_PARSING_ERROR"
    REQUEST_CREATION_ERROR = "REQUEST_CREATION_ERROR"
    JSON_SERIALIZATION_ERROR = "JSON_SERIALIZATION_ERROR"
    FORM_SERIALIZATION_ERROR = "FORM_SERIALIZATION_ERROR"
    API_REQUEST_ERROR = "API_REQUEST_ERROR"
    API_REQUEST_STATUS_ERROR = "API_REQUEST_STATUS_ERROR"
    JSON_DESERIALIZATION_ERROR = "JSON_DESERIALIZATION_ERROR"


TRANSIENT_ERROR_CODES = frozenset(
    {ErrorCode.API_REQUEST_ERROR, ErrorCode.API_REQUEST_STATUS_ERROR}
)


class HttpCallError(Exception):
    """Base class for every classified failure of an outbound call.

    Carries a classification code, a human readable message and an open set
    of named diagnostic values (the serialized request, the raw response
    body, ...) attached with :meth:`with_param`.
    """

    code: ErrorCode

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        if code is not None:
            self.code = code
        self.message = message
        self.params: Dict[str, Any] = {}
        super().__init__(self.message)

    def with_param(self, key: str, value: Any) -> "HttpCallError":
        self.params[key] = value
        return self

    @property
    def is_transient(self) -> bool:
        return self.code in TRANSIENT_ERROR_CODES

    def log(self) -> None:
        getLogger("httpcall").error(
            f"[{self.code.value}] {self.message}",
            extra={"error_code": self.code.value, "error_params": self.params},
        )
        if self.params:
            getLogger("httpcall").debug(f"Error params: {self.params}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class URLParsingError(HttpCallError):
    code = ErrorCode.URL_PARSING_ERROR


class RequestCreationError(HttpCallError):
    code = ErrorCode.REQUEST_CREATION_ERROR


class JSONSerializationError(HttpCallError):
    code = ErrorCode.JSON_SERIALIZATION_ERROR


class FormSerializationError(HttpCallError):
    code = ErrorCode.FORM_SERIALIZATION_ERROR


class APIRequestError(HttpCallError):
    """The transport failed: network error, timeout or aborted request."""

    code = ErrorCode.API_REQUEST_ERROR


class APIRequestStatusError(HttpCallError):
    """The server answered with a status other than 200."""

    code = ErrorCode.API_REQUEST_STATUS_ERROR

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class JSONDeserializationError(HttpCallError):
    code = ErrorCode.JSON_DESERIALIZATION_ERROR
