"""Exception types raised by marcrules.

Configuration problems surface when a rule is built; extraction problems
surface when a rule runs against a record.
"""


class MarcRulesError(Exception):
    """Base class for all marcrules errors."""


class ConfigurationError(MarcRulesError, ValueError):
    """A rule could not be built from the given spec or options."""


class TranslationMapNotFound(ConfigurationError):
    """No translation map with the requested name exists on the search path."""


class ExtractionError(MarcRulesError):
    """A record could not be read while extracting values from it."""
