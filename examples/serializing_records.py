#!/usr/bin/env python3
"""
Serializing whole MARC records

Shows the three serialization formats side by side for one record:
- binary: ISO 2709, base64-encoded for storage in a text field
- xml: MARCXML
- json: marc-in-json
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

try:
    from pymarc import Field, Indicators, Record, Subfield
    from marcrules import ConfigurationError, serialized_marc
except ImportError:
    print("Error: marcrules not installed")
    print("Install with: pip install -e .")
    sys.exit(1)


def create_sample_record():
    record = Record(leader='00000nam a2200000 a 4500')
    record.add_field(
        Field(tag='001', data='ocm12345678'),
        Field(tag='245', indicators=Indicators('1', '0'), subfields=[
            Subfield('a', 'Systems programming :'),
            Subfield('b', 'a practical guide /'),
        ]),
    )
    return record


def main():
    record = create_sample_record()

    for fmt in ('binary', 'xml', 'json'):
        rule = serialized_marc(format=fmt)
        print(f"--- {fmt} ---")
        print(rule.serialize(record))
        print()

    raw = serialized_marc(format='binary', binary_escape=False).serialize(record)
    print(f"Raw ISO 2709 length: {len(raw)} bytes")

    # Bad formats fail when the rule is built, before any record is seen
    try:
        serialized_marc(format='marc21')
    except ConfigurationError as e:
        print(f"Rejected: {e}")


if __name__ == '__main__':
    main()
