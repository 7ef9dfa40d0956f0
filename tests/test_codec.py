"""Tests for JSON / MessagePack encoding of Options."""

import threading

import msgspec
import pytest
from hypothesis import given
from hypothesis import strategies as st

from optionals import Nothing, Option, OptionCodec, Some
from optionals.codec import Format, decode, encode, get_codec
from tests.strategies import options

wire_values = st.one_of(
    st.none(),
    st.integers(min_value=-(2**63), max_value=2**63 - 1),
    st.text(alphabet=st.characters(blacklist_categories=('Cs',)), max_size=50),
)


class TestJsonShape:
    """The wire shape keeps the two states distinct."""

    def test_some_shape(self):
        assert msgspec.json.decode(encode(Some(3))) == {'kind': 'some', 'value': 3}

    def test_some_none_shape(self):
        assert msgspec.json.decode(encode(Some(None))) == {'kind': 'some', 'value': None}

    def test_nothing_shape(self):
        assert msgspec.json.decode(encode(Nothing)) == {'kind': 'nothing'}


class TestDecode:
    """Tests for decoding into typed options."""

    def test_decode_some(self):
        assert decode(b'{"kind": "some", "value": 3}', int) == Some(3)

    def test_decode_nothing(self):
        assert decode(b'{"kind": "nothing"}', int) == Nothing

    def test_decode_some_none(self):
        """Some(None) survives decoding when the element type allows None."""
        assert decode(b'{"kind": "some", "value": null}', int | None) == Some(None)

    def test_decode_wrong_element_type(self):
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"kind": "some", "value": "three"}', int)

    def test_decode_unknown_tag(self):
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"kind": "maybe"}', int)

    def test_decode_malformed(self):
        with pytest.raises(msgspec.DecodeError):
            decode(b'{"kind": ', int)

    def test_decode_nested_value(self):
        assert decode(b'{"kind": "some", "value": [1, 2]}', list[int]) == Some([1, 2])


class TestOptionCodec:
    """Tests for the OptionCodec class."""

    def test_json_round_trip(self):
        codec = OptionCodec(str)
        assert codec.decode(codec.encode(Some('Daffy Duck'))) == Some('Daffy Duck')

    def test_msgpack_round_trip(self):
        codec = OptionCodec(int, format='msgpack')
        assert codec.format is Format.MSGPACK
        assert codec.decode(codec.encode(Some(7))) == Some(7)
        assert codec.decode(codec.encode(Nothing)) == Nothing

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            OptionCodec(int, format='yaml')

    def test_unserializable_value(self):
        with pytest.raises(TypeError):
            OptionCodec(object).encode(Some(object()))

    def test_get_codec_is_shared(self):
        assert get_codec(int) is get_codec(int)
        assert get_codec(int, 'json') is not get_codec(int, 'msgpack')

    def test_encoders_are_per_thread(self):
        codec = OptionCodec(int)
        results: list[bytes] = []

        def worker() -> None:
            results.append(codec.encode(Some(1)))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == [b'{"kind":"some","value":1}'] * 4

    def test_repr(self):
        assert repr(OptionCodec(int)) == "OptionCodec(<class 'int'>, format='json')"

    @given(options(wire_values), st.sampled_from(list(Format)))
    def test_round_trip_property(self, opt: Option, fmt: Format):
        codec = get_codec(int | str | None, fmt)
        assert codec.decode(codec.encode(opt)) == opt
