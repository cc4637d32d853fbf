"""Extraction rules: extract, then take-first, translate and trim.

A rule is built once per output field and then run once per record:

>>> rule = ExtractionRule.build("245abcd", trim_punctuation=True)
>>> titles = []
>>> rule.run(record, titles)
>>> titles
['The Great Book a subtitle']

Building is where everything that can be misconfigured is checked. A
rule that builds never raises ConfigurationError when it runs; the only
per-record failure is ExtractionError from a malformed record.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Union

from .extractor import MarcExtractor
from .punctuation import trim_punctuation
from .translation_map import TranslationMap, resolve

__all__ = [
    "ExtractionOptions",
    "ExtractionRule",
    "extract_marc",
    "first",
]

_RECOGNIZED = ("first", "trim_punctuation", "translation_map")


def first(values: List[str]) -> List[str]:
    """Truncate ``values`` in place to at most its first element.

    Returns the same list for chaining.
    """
    del values[1:]
    return values


@dataclass(frozen=True)
class ExtractionOptions:
    """Post-processing switches for an extraction rule.

    Attributes:
        first: Keep only the first extracted value.
        trim_punctuation: Run every value through trim_punctuation.
        translation_map: Map name, mapping or TranslationMap used to
            translate values.
        extractor_options: Passed unchanged to MarcExtractor
            (``separator``, ``alternate_script``).
    """

    first: bool = False
    trim_punctuation: bool = False
    translation_map: Optional[Union[str, Mapping, TranslationMap]] = None
    extractor_options: Mapping[str, Any] = field(default_factory=dict)

    # translation_map and extractor_options may be dicts
    __hash__ = None

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]] = None) -> "ExtractionOptions":
        """Split a flat option dict into recognized options and the rest.

        ``options`` is left untouched.
        """
        options = dict(options or {})
        recognized = {key: options.pop(key) for key in _RECOGNIZED if key in options}
        return cls(extractor_options=options, **recognized)


@dataclass(frozen=True, eq=False)
class ExtractionRule:
    """A built extraction rule; immutable and safe to share across threads.

    Rules compare and hash by identity, so they can key a dict of outputs.

    Use ExtractionRule.build (or extract_marc) rather than constructing
    one directly.
    """

    spec: str
    options: ExtractionOptions
    extractor: MarcExtractor
    translation_map: Optional[TranslationMap] = None

    @classmethod
    def build(cls, spec: str, options: Optional[Union[ExtractionOptions, Mapping[str, Any]]] = None,
              **kwargs) -> "ExtractionRule":
        """Build a rule for ``spec``.

        Options may be given as an ExtractionOptions, a dict, keyword
        arguments, or a dict plus keyword arguments (keywords win).

        Raises:
            ConfigurationError: If the spec or an extractor option is
                invalid, or the translation map cannot be found.
        """
        if not isinstance(options, ExtractionOptions):
            merged = dict(options or {})
            merged.update(kwargs)
            options = ExtractionOptions.from_dict(merged)
        elif kwargs:
            merged = dict(options.extractor_options)
            merged.update(kwargs)
            options = ExtractionOptions.from_dict({
                "first": options.first,
                "trim_punctuation": options.trim_punctuation,
                "translation_map": options.translation_map,
                **merged,
            })

        options = ExtractionOptions(
            first=bool(options.first),
            trim_punctuation=bool(options.trim_punctuation),
            translation_map=options.translation_map,
            extractor_options=MappingProxyType(dict(options.extractor_options)),
        )
        extractor = MarcExtractor(spec, **options.extractor_options)
        return cls(spec, options, extractor, resolve(options.translation_map))

    def run(self, record, accumulator: List[str], context=None) -> None:
        """Append this rule's values for ``record`` to ``accumulator``.

        Raises:
            ExtractionError: If the record cannot be read.
        """
        accumulator.extend(self.extractor.extract(record))

        if self.options.first:
            first(accumulator)

        if self.translation_map is not None:
            self.translation_map.translate_in_place(accumulator)

        if self.options.trim_punctuation:
            accumulator[:] = [trim_punctuation(value) for value in accumulator]

    __call__ = run

    def values(self, record, context=None) -> List[str]:
        """Run the rule against a fresh accumulator and return it."""
        accumulator: List[str] = []
        self.run(record, accumulator, context)
        return accumulator


def extract_marc(spec: str, **options) -> ExtractionRule:
    """Build an extraction rule from keyword options.

    Examples:
        >>> title = extract_marc("245abcd", trim_punctuation=True)
        >>> record_id = extract_marc("001", first=True)
        >>> geo = extract_marc("043a", separator=None, translation_map="marc_geographic")
    """
    return ExtractionRule.build(spec, **options)
