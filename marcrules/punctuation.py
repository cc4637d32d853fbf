"""Punctuation trimming for extracted MARC values."""

import re

_TRAILING_SEPARATORS = re.compile(r" ?[,/;:]+\s*\Z")
_TRAILING_PERIOD = re.compile(r"(\w\w\w)\. *$")
_ENCLOSING_BRACKETS = re.compile(r"\A\[?([^\[\]]+)\]?$")


def trim_punctuation(value: str) -> str:
    """Trim cataloging punctuation, mostly from the end of a value.

    Removes, in order:

    - a trailing run of commas, slashes, semicolons and colons, the single
      space before it and any whitespace after it
    - a trailing period preceded by at least three word characters, so
      short abbreviations such as ``"ed."`` keep their period
    - a leading ``[`` and/or trailing ``]`` when no other square bracket
      appears inside the value

    Returns a new string; ``value`` is not changed.

    Example:
        >>> trim_punctuation("Moby Dick /")
        'Moby Dick'
        >>> trim_punctuation("[Paris]")
        'Paris'
    """
    value = _TRAILING_SEPARATORS.sub("", value, count=1)
    value = _TRAILING_PERIOD.sub(r"\1", value, count=1)
    value = _ENCLOSING_BRACKETS.sub(r"\1", value, count=1)
    return value
