from ._config import Config
from ._http_call import HttpCall
from ._services import ApiCallService
from ._utils import ContentType, RequestSpec
from .models import (
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
    "ApiCallService",
    "Config",
    "ContentType",
    "ErrorCode",
    "FormSerializationError",
    "HttpCall",
    "HttpCallError",
    "JSONDeserializationError",
    "JSONSerializationError",
    "RequestCreationError",
    "RequestSpec",
    "URLParsingError",
]
