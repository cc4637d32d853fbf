"""Whole-record serialization to ISO 2709, MARCXML or marc-in-json.

Formats
-------
- **binary**: ISO 2709, base64-encoded by default so it can be stored in a
  text field. With ``binary_escape=False`` the raw bytes are returned as
  a Latin-1 string (one character per byte).
- **xml**: MARCXML with the ``http://www.loc.gov/MARC21/slim`` namespace.
- **json**: marc-in-json, the ``{"leader": ..., "fields": [...]}`` layout.

Examples
--------
>>> rule = SerializationRule.build("json")
>>> rule.serialize(record)
'{"leader": "...", "fields": [{"001": "12345"}, ...]}'

>>> serialize(record, "binary")
'MDAxNjJuYW0gIDIyMDAwNzMgICA0NTAwMDAxMDAwNjAwMDAwMjQ1MDAxOD...'
"""

import base64
import json
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

import pymarc

from .errors import ConfigurationError

__all__ = [
    "SerializationFormat",
    "SerializationRule",
    "serialize",
    "serialized_marc",
]


class SerializationFormat(str, Enum):
    BINARY = "binary"
    XML = "xml"
    JSON = "json"

    @classmethod
    def parse(cls, value: Union[str, "SerializationFormat"]) -> "SerializationFormat":
        """Return the format named by ``value`` (case-insensitive).

        Raises:
            ConfigurationError: If ``value`` names no supported format.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unsupported serialization format {value!r}. "
                f"Supported formats: {', '.join(f.value for f in cls)}"
            ) from None


def _to_binary(record, binary_escape: bool) -> str:
    raw = record.as_marc()
    if binary_escape:
        return base64.b64encode(raw).decode("ascii")
    return raw.decode("latin-1")


def _to_xml(record) -> str:
    return pymarc.record_to_xml(record, namespace=True).decode("utf-8")


def _to_json(record) -> str:
    return json.dumps(record.as_dict(), ensure_ascii=False)


@dataclass(frozen=True)
class SerializationRule:
    """A built serialization rule for one output format."""

    format: SerializationFormat
    binary_escape: bool = True

    @classmethod
    def build(cls, format: Union[str, SerializationFormat], binary_escape: bool = True) -> "SerializationRule":
        """Validate ``format`` and return a rule for it.

        Raises:
            ConfigurationError: If ``format`` is not binary, xml or json.
        """
        return cls(SerializationFormat.parse(format), bool(binary_escape))

    def serialize(self, record) -> str:
        if self.format is SerializationFormat.BINARY:
            return _to_binary(record, self.binary_escape)
        if self.format is SerializationFormat.XML:
            return _to_xml(record)
        return _to_json(record)

    def run(self, record, accumulator: List[str], context=None) -> None:
        """Append the serialized record to ``accumulator``."""
        accumulator.append(self.serialize(record))

    __call__ = run


def serialize(record, format: Union[str, SerializationFormat], binary_escape: bool = True) -> str:
    """Serialize one record without keeping a rule around."""
    return SerializationRule.build(format, binary_escape).serialize(record)


def serialized_marc(format: Union[str, SerializationFormat], binary_escape: bool = True) -> SerializationRule:
    """Build a serialization rule; macro-style alias of SerializationRule.build.

    Examples:
        >>> marc_display = serialized_marc(format="binary")
        >>> marc_xml = serialized_marc(format="xml")
    """
    return SerializationRule.build(format, binary_escape)
