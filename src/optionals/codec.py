"""JSON and MessagePack encoding of Options.

Options are encoded as msgspec tagged unions, so the two states never
collapse into one another on the wire - ``Some(None)`` and ``Nothing``
stay distinct:

    Some(3)     -> {"kind": "some", "value": 3}
    Some(None)  -> {"kind": "some", "value": null}
    Nothing     -> {"kind": "nothing"}

Thread Safety:
    - Encoders are NOT thread-safe -> use thread-local instances
    - Decoders ARE thread-safe (reentrant) -> can share
    - OptionCodec handles this automatically

Usage:
    >>> from optionals.codec import OptionCodec, decode, encode
    >>> codec = OptionCodec(int)
    >>> codec.decode(codec.encode(Some(3)))
    Some(value=3)
    >>> decode(encode(Nothing), int)
    Nothing
"""

from __future__ import annotations

import functools
import threading
from enum import StrEnum
from typing import Any

import msgspec

from optionals.option import NothingType, Option, Some

__all__ = [
    'Format',
    'OptionCodec',
    'decode',
    'encode',
    'get_codec',
]


class Format(StrEnum):
    """Serialization format."""

    JSON = 'json'
    MSGPACK = 'msgpack'


class OptionCodec[T]:
    """Encoder/decoder pair for ``Option[T]`` in one format.

    Uses thread-local storage for encoders (not thread-safe) and a shared
    decoder (thread-safe/reentrant).

    Attributes:
        value_type: Element type of the decoded options.
        format: JSON or MessagePack.
    """

    __slots__ = ('_decoder', '_local', 'format', 'value_type')

    def __init__(self, value_type: type[T] | Any, format: Format | str = Format.JSON) -> None:  # noqa: A002
        self.value_type = value_type
        self.format = Format(format)
        self._local = threading.local()
        option_type = Some[value_type] | NothingType  # type: ignore[valid-type]
        if self.format is Format.JSON:
            self._decoder: Any = msgspec.json.Decoder(option_type)
        else:
            self._decoder = msgspec.msgpack.Decoder(option_type)

    @property
    def _encoder(self) -> msgspec.json.Encoder | msgspec.msgpack.Encoder:
        """Get or create the thread-local encoder."""
        encoder = getattr(self._local, 'encoder', None)
        if encoder is None:
            encoder = msgspec.json.Encoder() if self.format is Format.JSON else msgspec.msgpack.Encoder()
            self._local.encoder = encoder
        return encoder

    def encode(self, opt: Option[T]) -> bytes:
        """Encode an option to bytes.

        Raises:
            TypeError: If the contained value is not serializable.
        """
        return self._encoder.encode(opt)

    def decode(self, buf: bytes | bytearray | memoryview | str) -> Option[T]:
        """Decode bytes to an option of ``value_type``.

        Raises:
            msgspec.DecodeError: If the buffer is malformed.
            msgspec.ValidationError: If the data is not an encoded Option[value_type].
        """
        return self._decoder.decode(buf)

    def __repr__(self) -> str:
        return f'OptionCodec({self.value_type!r}, format={self.format.value!r})'


@functools.lru_cache(maxsize=128)
def get_codec(value_type: Any, format: Format | str = Format.JSON) -> OptionCodec[Any]:  # noqa: A002
    """Return a shared codec for the element type and format."""
    return OptionCodec(value_type, Format(format))


def encode(opt: Option[Any], *, format: Format | str = Format.JSON) -> bytes:  # noqa: A002
    """Encode an option; the element type does not matter for encoding."""
    return get_codec(object, Format(format)).encode(opt)


def decode[T](
    buf: bytes | bytearray | memoryview | str,
    value_type: type[T] | Any,
    *,
    format: Format | str = Format.JSON,  # noqa: A002
) -> Option[T]:
    """Decode an option whose value must match ``value_type``."""
    return get_codec(value_type, Format(format)).decode(buf)
