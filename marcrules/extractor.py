"""Field/subfield extraction driven by compact string specs.

A spec string holds one or more selectors separated by colons:

- ``001`` or ``008[35-37]``: a control field, optionally sliced to a
  single byte position or an inclusive range of positions
- ``245abcd``: subfields a, b, c and d of every 245 field
- ``650|*0|a``: subfield a of 650 fields whose second indicator is 0
  (``*`` matches any indicator)
- ``700``: every subfield of every 700 field

Examples
--------
>>> extractor = MarcExtractor("245ab:100a")
>>> extractor.extract(record)
['The Great Book a subtitle', 'Smith, John']

>>> MarcExtractor("650a", separator=None).extract(record)
['History', 'Science']
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from .errors import ConfigurationError, ExtractionError

__all__ = [
    "ControlSpec",
    "DataSpec",
    "MarcExtractor",
    "extract_by_spec",
    "parse_spec",
]

ALTERNATE_SCRIPT_TAG = "880"

_CONTROL_SPEC = re.compile(r"\A(00\d)(?:\[(\d+)(?:-(\d+))?\])?\Z")
_DATA_SPEC = re.compile(r"\A([0-9A-Za-z]{3})(?:\|([0-9a-z *]{2})\|)?([0-9a-z]*)\Z")


@dataclass(frozen=True)
class ControlSpec:
    """Selects a control field value, or a byte range of it."""

    tag: str
    start: Optional[int] = None
    end: Optional[int] = None

    def value_of(self, data: str) -> Optional[str]:
        if self.start is None:
            return data
        end = self.start if self.end is None else self.end
        sliced = data[self.start:end + 1]
        return sliced or None


@dataclass(frozen=True)
class DataSpec:
    """Selects subfields from data fields, filtered by indicators."""

    tag: str
    indicator1: Optional[str] = None
    indicator2: Optional[str] = None
    codes: Optional[FrozenSet[str]] = None

    def matches_indicators(self, indicators) -> bool:
        if self.indicator1 is not None and indicators[0] != self.indicator1:
            return False
        if self.indicator2 is not None and indicators[1] != self.indicator2:
            return False
        return True

    def wants(self, code: str) -> bool:
        return self.codes is None or code in self.codes


def _parse_selector(selector: str):
    match = _CONTROL_SPEC.match(selector)
    if match:
        tag, start, end = match.groups()
        start = int(start) if start is not None else None
        end = int(end) if end is not None else None
        if start is not None and end is not None and end < start:
            raise ConfigurationError(
                f"Byte range in '{selector}' ends before it starts"
            )
        return ControlSpec(tag, start, end)

    match = _DATA_SPEC.match(selector)
    if match is None:
        raise ConfigurationError(
            f"Unrecognized field spec '{selector}'. Expected a tag "
            f"optionally followed by |ind1ind2| and subfield codes, "
            f"e.g. '245abc', '650|*0|a' or '008[35-37]'"
        )
    tag, indicators, codes = match.groups()
    if tag.startswith("00"):
        raise ConfigurationError(
            f"Control field spec '{selector}' cannot select subfields "
            f"or indicators"
        )
    ind1 = ind2 = None
    if indicators is not None:
        ind1 = None if indicators[0] == "*" else indicators[0]
        ind2 = None if indicators[1] == "*" else indicators[1]
    return DataSpec(tag, ind1, ind2, frozenset(codes) if codes else None)


def parse_spec(spec: str) -> Dict[str, List[Any]]:
    """Parse a spec string into selectors grouped by tag.

    Raises:
        ConfigurationError: If any selector is malformed.
    """
    if not isinstance(spec, str) or not spec.strip():
        raise ConfigurationError(f"Field spec must be a non-empty string, got {spec!r}")

    by_tag: Dict[str, List[Any]] = {}
    for selector in spec.split(":"):
        selector = selector.strip()
        if not selector:
            continue
        parsed = _parse_selector(selector)
        by_tag.setdefault(parsed.tag, []).append(parsed)
    if not by_tag:
        raise ConfigurationError(f"Field spec {spec!r} contains no selectors")
    return by_tag


def _linked_tag(field) -> Optional[str]:
    """Return the tag an 880 field stands in for, from its $6 linkage."""
    for subfield in getattr(field, "subfields", None) or ():
        if subfield.code == "6":
            return subfield.value[:3] or None
    return None


class MarcExtractor:
    """Extracts string values from pymarc records according to a spec.

    Args:
        spec: Colon-separated field selectors, see module docs.
        separator: String used to join the selected subfields of a field
            into one value. ``None`` yields each subfield value separately.
        alternate_script: ``True`` to include 880 fields linked to the
            selected tags, ``False`` to skip them, ``"only"`` to return
            nothing but the linked 880 fields.

    Raises:
        ConfigurationError: If the spec or an option is invalid.
    """

    def __init__(self, spec: str, separator: Optional[str] = " ",
                 alternate_script: Any = True, **unknown):
        if unknown:
            raise ConfigurationError(
                f"Unknown extractor option(s): {', '.join(sorted(unknown))}. "
                f"Supported options: separator, alternate_script"
            )
        if not (alternate_script is True or alternate_script is False
                or alternate_script == "only"):
            raise ConfigurationError(
                f"alternate_script must be one of True, False or 'only', "
                f"got {alternate_script!r}"
            )
        if separator is not None and not isinstance(separator, str):
            raise ConfigurationError(
                f"separator must be a string or None, got {separator!r}"
            )
        self.spec = spec
        self.separator = separator
        self.alternate_script = alternate_script
        self._specs_by_tag = parse_spec(spec)

    def __repr__(self) -> str:
        return (
            f"MarcExtractor({self.spec!r}, separator={self.separator!r}, "
            f"alternate_script={self.alternate_script!r})"
        )

    @property
    def tags(self) -> Tuple[str, ...]:
        """Tags named by the spec, in spec order."""
        return tuple(self._specs_by_tag)

    def extract(self, record) -> List[str]:
        """Return every value the spec selects from ``record``, in field order.

        Raises:
            ExtractionError: If ``record`` is not a MARC record or one of its
                fields does not have the shape its tag requires.
        """
        return list(self.iter_values(record))

    def iter_values(self, record) -> Iterator[str]:
        for field, specs in self._matching_fields(record):
            for spec in specs:
                if isinstance(spec, ControlSpec):
                    yield from self._control_values(field, spec)
                else:
                    yield from self._data_values(field, spec)

    def _matching_fields(self, record):
        try:
            fields = record.fields
        except AttributeError as e:
            raise ExtractionError(
                f"Cannot extract fields from {type(record).__name__}; "
                f"expected a MARC record"
            ) from e

        for field in fields:
            tag = field.tag
            if tag == ALTERNATE_SCRIPT_TAG:
                if self.alternate_script is False:
                    continue
                tag = _linked_tag(field)
            elif self.alternate_script == "only":
                continue
            specs = self._specs_by_tag.get(tag)
            if specs:
                yield field, specs

    def _control_values(self, field, spec: ControlSpec) -> Iterator[str]:
        data = getattr(field, "data", None)
        if not isinstance(data, str):
            raise ExtractionError(
                f"Field {field.tag} is selected as a control field but "
                f"carries no control data"
            )
        value = spec.value_of(data)
        if value:
            yield value

    def _data_values(self, field, spec: DataSpec) -> Iterator[str]:
        subfields = getattr(field, "subfields", None)
        if subfields is None:
            raise ExtractionError(
                f"Field {field.tag} is selected as a data field but has "
                f"no subfields"
            )
        if not spec.matches_indicators(field.indicators):
            return
        # $6 linkage is bookkeeping, only returned when asked for by code
        values = [
            sf.value for sf in subfields
            if spec.wants(sf.code) and (spec.codes or sf.code != "6")
        ]
        if not values:
            return
        if self.separator is None:
            yield from values
        else:
            yield self.separator.join(values)


def extract_by_spec(record, spec: str, **options) -> List[str]:
    """Extract values from a single record without keeping an extractor.

    Example:
        >>> extract_by_spec(record, "245a")
        ['The Great Book']
    """
    return MarcExtractor(spec, **options).extract(record)
