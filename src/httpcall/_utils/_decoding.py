from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import JSONDeserializationError

T = TypeVar("T")


def decode_response(raw: bytes, target: Type[T] | Any, request: str = "") -> T:
    """Deserialize a successful JSON response into ``target``.

    Args:
        raw: The response body.
        target: Any type pydantic can validate into: a model class, a
            dataclass, ``dict[str, Any]``, ``list[int]``...
        request: Description of the originating request, attached to errors.

    Raises:
        JSONDeserializationError: If the body is not valid JSON or does not
            fit ``target``.
    """
    try:
        return TypeAdapter(target).validate_json(raw)
    except ValidationError as e:
        error = JSONDeserializationError(str(e))
        error.with_param("response", raw.decode("utf-8", errors="replace"))
        error.with_param("request", request)
        error.log()
        raise error from e
