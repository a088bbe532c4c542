from .errors import (
    APIRequestError,
    APIRequestStatusError,
    ErrorCode,
    FormSerializationError,
    HttpCallError,
    JSONDeserializationError,
    JSONSerializationError,
    RequestCreationError,
    URLParsingError,
)

__all__ = [
    "APIRequestError",
    "APIRequestStatusError",
    "ErrorCode",
    "FormSerializationError",
    "HttpCallError",
    "JSONDeserializationError",
    "JSONSerializationError",
    "RequestCreationError",
    "URLParsingError",
]
