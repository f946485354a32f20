import json

import pytest

from spaceapi.models.extensions_model import Extensions, FrozenExtensions
from spaceapi.models.status_model import Contact, Location, Status
from spaceapi.utils.codec import decode, encode
from spaceapi.utils.errors import DecodeError, UnknownFieldError


class TestExtensions:
    def test_set_strips_prefix(self):
        extensions = Extensions()
        extensions.set("ext_foo", 1)
        assert extensions == {"foo": 1}

    def test_set_strips_one_prefix_only(self):
        extensions = Extensions()
        extensions.set("ext_ext_foo", 1)
        assert extensions == {"ext_foo": 1}
        assert extensions.encode() == {"ext_ext_foo": 1}

    def test_set_last_write_wins(self):
        extensions = Extensions()
        extensions.set("foo", 1)
        extensions.set("ext_foo", 2)
        assert extensions == {"foo": 2}
        assert len(extensions) == 1

    def test_encode(self):
        extensions = Extensions()
        extensions.set("b", [1, 2])
        extensions.set("a", {"nested": None})
        assert extensions.encode() == {"ext_b": [1, 2], "ext_a": {"nested": None}}

    def test_decode_prefixed(self):
        extensions = Extensions()
        extensions.decode("ext_ccc", "chaostreff")
        assert extensions == {"ccc": "chaostreff"}

    def test_decode_unknown(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            Extensions().decode("ccc", "chaostreff")
        assert exc_info.value.field_name == "ccc"

    def test_from_mapping(self):
        assert Extensions.from_mapping({"ext_a": 1, "b": 2}) == {"a": 1, "b": 2}

    def test_frozen_copy_is_read_only(self):
        frozen = FrozenExtensions({"a": 1})
        for change in (
            lambda: frozen.set("b", 2),
            lambda: frozen.decode("ext_b", 2),
            lambda: frozen.update(b=2),
            lambda: frozen.pop("a"),
            lambda: frozen.clear(),
        ):
            with pytest.raises(TypeError):
                change()
        with pytest.raises(TypeError):
            frozen["b"] = 2
        with pytest.raises(TypeError):
            del frozen["a"]
        assert frozen == {"a": 1}


class TestStatusExtensions:
    def test_idempotent_naming(self, v14_builder):
        encoded = encode(
            v14_builder.add_extension("aaa", "xxx").add_extension("ext_aaa", "yyy").build()
        )
        assert encoded.count('"ext_aaa":"yyy"') == 1
        assert '"xxx"' not in encoded
        keys = [key for key in json.loads(encoded) if key.startswith("ext_")]
        assert keys == ["ext_aaa"]

    def test_written_after_known_fields(self, v0_13_builder):
        status = v0_13_builder.add_extension("versions", {"api": "1"}).build()
        keys = list(json.loads(encode(status)))
        assert keys[-1] == "ext_versions"
        assert keys[:3] == ["api", "space", "logo"]

    def test_no_extensions(self, v14_builder):
        assert "ext_" not in encode(v14_builder.build())

    def test_arbitrary_values_round_trip(self, v14_builder):
        status = (
            v14_builder.add_extension("null", None)
            .add_extension("flag", True)
            .add_extension("number", 4.5)
            .add_extension("list", [1, "two", {"three": [3]}])
            .build()
        )
        decoded = decode(encode(status))
        assert decoded.extensions == status.extensions
        assert decoded == status

    def test_null_extension_is_written(self, v14_builder):
        encoded = encode(v14_builder.add_extension("null", None).build())
        assert '"ext_null":null' in encoded

    def test_doubled_prefix_from_builder(self, v14_builder):
        status = v14_builder.add_extension("ext_ext_foo", 1).build()
        assert status.extensions == {"ext_foo": 1}
        assert encode(status).endswith('"ext_ext_foo":1}')

    def test_doubled_prefix_round_trip(self, v14_builder):
        text = encode(v14_builder.build())[:-1] + ',"ext_ext_foo":1}'
        status = decode(text)
        assert status.extensions == {"ext_foo": 1}
        assert encode(status) == text

    def test_extensions_key_in_document(self, v14_builder):
        text = encode(v14_builder.build())[:-1] + ',"extensions":{"a":1}}'
        with pytest.raises(DecodeError) as exc_info:
            decode(text)
        assert "unknown field `extensions`" in str(exc_info.value)

    def test_direct_construction_keeps_names(self):
        status = Status(
            space="foo",
            logo="bar",
            url="foobar",
            location=Location(lat=0.0, lon=0.0),
            contact=Contact(),
            extensions={"ext_foo": 1, "bar": 2},
        )
        assert status.extensions == {"ext_foo": 1, "bar": 2}
        assert json.loads(encode(status))["ext_ext_foo"] == 1

    def test_status_extensions_are_read_only(self, v14_builder):
        status = v14_builder.add_extension("a", 1).build()
        with pytest.raises(TypeError):
            status.extensions.set("b", 2)
        with pytest.raises(TypeError):
            status.extensions["b"] = 2
        assert encode(status).endswith('"ext_a":1}')

    def test_decoded_extensions_are_read_only(self, v14_builder):
        status = decode(encode(v14_builder.add_extension("a", 1).build()))
        with pytest.raises(TypeError):
            status.extensions.update(b=2)
        assert status.extensions == {"a": 1}
