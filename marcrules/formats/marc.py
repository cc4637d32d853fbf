"""ISO 2709 binary MARC reading and writing.

Records are `pymarc.Record` objects, the same objects extraction and
serialization rules take.

Examples
--------
Read records from a MARC file:

>>> from marcrules.formats import marc
>>> for record in marc.read("records.mrc"):
...     print(record["001"].data)

Write records to a MARC file:

>>> count = marc.write(records, "output.mrc")
>>> print(f"Wrote {count} records")

Read from a file-like object:

>>> with open("records.mrc", "rb") as f:
...     for record in marc.read(f):
...         process(record)
"""

import os
from typing import Any, Iterable, Iterator, Union

from pymarc import MARCReader, MARCWriter, Record

from ..errors import ExtractionError

__all__ = ["read", "write"]


def _iter_records(source, to_unicode: bool, force_utf8: bool) -> Iterator[Record]:
    if hasattr(source, "__fspath__") or isinstance(source, str):
        with open(os.fspath(source), "rb") as f:
            yield from _iter_records(f, to_unicode, force_utf8)
        return

    reader = MARCReader(source, to_unicode=to_unicode, force_utf8=force_utf8)
    for record in reader:
        if record is None:
            raise ExtractionError(
                f"Could not parse MARC record: {reader.current_exception}"
            ) from reader.current_exception
        yield record


def read(source: Union[str, os.PathLike, Any], to_unicode: bool = True,
         force_utf8: bool = False) -> Iterator[Record]:
    """Read MARC records from an ISO 2709 file or file-like object.

    Args:
        source: File path (str or pathlib.Path) or file-like object opened
            in binary mode.
        to_unicode: Decode field data to str (passed to pymarc).
        force_utf8: Treat records as UTF-8 regardless of leader/09.

    Returns:
        Iterator over Record objects. A path is opened on the first
        ``next()`` and closed when the iterator is exhausted or closed.

    Raises:
        ExtractionError: While iterating, if a record cannot be parsed.
        FileNotFoundError: On the first ``next()``, if the path does not exist.
    """
    return _iter_records(source, to_unicode, force_utf8)


def write(records: Iterable[Record], dest: Union[str, os.PathLike, Any]) -> int:
    """Write MARC records to an ISO 2709 file.

    Args:
        records: Iterable of Record objects.
        dest: File path (str or pathlib.Path) or file-like object opened in
            binary mode. A file-like object is left open.

    Returns:
        Number of records written.
    """
    if hasattr(dest, "__fspath__") or isinstance(dest, str):
        with open(os.fspath(dest), "wb") as f:
            return _write_all(records, f)
    return _write_all(records, dest)


def _write_all(records: Iterable[Record], f) -> int:
    writer = MARCWriter(f)
    count = 0
    for record in records:
        writer.write(record)
        count += 1
    return count
