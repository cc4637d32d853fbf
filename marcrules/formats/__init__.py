"""Record file formats.

Formats
-------
- **marc**: ISO 2709 binary MARC (standard interchange format)

Serializing single records to MARCXML or marc-in-json is handled by
`marcrules.serialization`.

Quick Start
-----------
>>> from marcrules.formats import marc
>>> for record in marc.read("records.mrc"):
...     print(record["245"]["a"])
>>> count = marc.write(records, "output.mrc")
"""

from . import marc

__all__ = [
    "marc",
]
