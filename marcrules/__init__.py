"""
marcrules: field extraction and record serialization rules for MARC21.

Rules are built once from a compact spec and then run against many
`pymarc.Record` objects:

>>> from marcrules import extract_marc, serialized_marc
>>> title = extract_marc("245abcd", trim_punctuation=True)
>>> language = extract_marc("008[35-37]", first=True, translation_map="marc_languages")
>>> full_record = serialized_marc(format="xml")
>>> values = []
>>> title.run(record, values)
"""

from .context import Context
from .errors import (
    ConfigurationError,
    ExtractionError,
    MarcRulesError,
    TranslationMapNotFound,
)
from .extractor import MarcExtractor, extract_by_spec
from .punctuation import trim_punctuation
from .rules import ExtractionOptions, ExtractionRule, extract_marc, first
from .serialization import (
    SerializationFormat,
    SerializationRule,
    serialize,
    serialized_marc,
)
from .translation_map import TranslationMap

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Context",
    "ExtractionError",
    "ExtractionOptions",
    "ExtractionRule",
    "MarcExtractor",
    "MarcRulesError",
    "SerializationFormat",
    "SerializationRule",
    "TranslationMap",
    "TranslationMapNotFound",
    "extract_by_spec",
    "extract_marc",
    "first",
    "serialize",
    "serialized_marc",
    "trim_punctuation",
]
