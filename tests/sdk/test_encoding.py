import json
from dataclasses import dataclass
from urllib.parse import parse_qs

import pytest
from pydantic import BaseModel, Field

from httpcall._utils import ContentType, encode_body
from httpcall.models.errors import (
    ErrorCode,
    FormSerializationError,
    JSONSerializationError,
)


class Payload(BaseModel):
    user_name: str = Field(alias="userName")
    active: bool = True


@dataclass
class Point:
    x: int
    y: int


class TestEncodeBody:
    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_no_body_sends_nothing(self, content_type: ContentType):
        assert encode_body(None, content_type) is None

    def test_unknown_content_type_drops_body(self):
        assert encode_body({"a": 1}, "text/plain") is None  # type: ignore[arg-type]

    class TestJson:
        def test_mapping(self):
            body = {"name": "widget", "price": 9.5, "tags": ["a"]}

            encoded = encode_body(body, ContentType.JSON)

            assert encoded == b'{"name":"widget","price":9.5,"tags":["a"]}'
            assert json.loads(encoded) == body

        def test_pydantic_model_uses_aliases(self):
            encoded = encode_body(Payload(userName="ada"), ContentType.JSON)

            assert json.loads(encoded) == {"userName": "ada", "active": True}

        def test_dataclass(self):
            assert encode_body(Point(1, 2), ContentType.JSON) == b'{"x":1,"y":2}'

        def test_scalar(self):
            assert encode_body("text", ContentType.JSON) == b'"text"'

        def test_failure_is_classified(self):
            body = {"bad": {1, 2}}

            with pytest.raises(JSONSerializationError) as exc_info:
                encode_body(body, ContentType.JSON)

            assert exc_info.value.code == ErrorCode.JSON_SERIALIZATION_ERROR
            assert exc_info.value.params["body"] == repr(body)
            assert not exc_info.value.is_transient

    class TestForm:
        def test_mapping(self):
            encoded = encode_body(
                {"q": "a b&c", "page": 2}, ContentType.FORM_URL_ENCODED
            )

            assert encoded is not None
            assert parse_qs(encoded.decode()) == {"q": ["a b&c"], "page": ["2"]}

        def test_sequences_and_booleans(self):
            encoded = encode_body(
                {"tag": ["x", "y"], "flag": False, "empty": None},
                ContentType.FORM_URL_ENCODED,
            )

            assert encoded is not None
            assert parse_qs(encoded.decode(), keep_blank_values=True) == {
                "tag": ["x", "y"],
                "flag": ["false"],
                "empty": [""],
            }

        def test_pydantic_model(self):
            encoded = encode_body(Payload(userName="ada"), ContentType.FORM_URL_ENCODED)

            assert encoded is not None
            assert parse_qs(encoded.decode()) == {
                "userName": ["ada"],
                "active": ["true"],
            }

        def test_non_mapping_body_is_rejected(self):
            with pytest.raises(FormSerializationError) as exc_info:
                encode_body("plain text", ContentType.FORM_URL_ENCODED)

            assert exc_info.value.code == ErrorCode.FORM_SERIALIZATION_ERROR
            assert exc_info.value.params["body"] == "'plain text'"
