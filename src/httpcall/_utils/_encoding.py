import dataclasses
import json
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

from ..models.errors import FormSerializationError, JSONSerializationError


class ContentType(str, Enum):
    JSON = "application/json"
    FORM_URL_ENCODED = "application/x-www-form-urlencoded"


def _to_plain(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return dataclasses.asdict(body)
    return body


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_form_value(item) for item in value]
    if value is None:
        return ""
    return value


def encode_json(body: Any) -> bytes:
    try:
        return json.dumps(_to_plain(body), separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        error = JSONSerializationError(f"request: {body!r}, error: {e}")
        error.with_param("body", repr(body))
        error.log()
        raise error from e


def encode_form(body: Any) -> bytes:
    plain = _to_plain(body)
    try:
        if not isinstance(plain, dict):
            raise TypeError(
                f"form bodies must be mappings of fields, got {type(plain).__name__}"
            )
        fields = {key: _form_value(value) for key, value in plain.items()}
        return urlencode(fields, doseq=True).encode("ascii")
    except (TypeError, ValueError) as e:
        error = FormSerializationError(f"request: {body!r}, error: {e}")
        error.with_param("body", repr(body))
        error.log()
        raise error from e


def encode_body(body: Any, content_type: ContentType) -> Optional[bytes]:
    """Serialize a request body according to its content type.

    Args:
        body: The value to send. ``None`` means the request has no body.
        content_type: Selects the serialization.

    Returns:
        The encoded bytes, or ``None`` when there is nothing to send. Content
        types other than JSON and form-url-encoded also yield ``None``: their
        bodies are dropped rather than guessed at.

    Raises:
        JSONSerializationError: If the body cannot be rendered as JSON.
        FormSerializationError: If the body cannot be rendered as form fields.
    """
    if body is None:
        return None
    if content_type == ContentType.JSON:
        return encode_json(body)
    if content_type == ContentType.FORM_URL_ENCODED:
        return encode_form(body)
    return None
