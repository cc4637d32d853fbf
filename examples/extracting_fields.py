#!/usr/bin/env python3
"""
Extracting index fields from MARC records

This example builds a small set of extraction rules, one per output
field, and runs them over every record in a MARC file (or over a
generated sample record when no file is given):

    python examples/extracting_fields.py records.mrc

Each rule is built once and reused for every record; each record gets
its own fresh accumulator per output field.
"""

import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

try:
    from pymarc import Field, Indicators, Record, Subfield
    from marcrules import Context, ExtractionError, extract_marc
    from marcrules.formats import marc
except ImportError:
    print("Error: marcrules not installed")
    print("Install with: pip install -e .")
    sys.exit(1)


RULES = {
    "id": extract_marc("001", first=True),
    "title": extract_marc("245abnp", trim_punctuation=True),
    "title_vern": extract_marc("245abnp", alternate_script="only", trim_punctuation=True),
    "author": extract_marc("100abcd:110ab:111ab", first=True, trim_punctuation=True),
    "language": extract_marc("008[35-37]:041a", separator=None,
                             translation_map="marc_languages"),
    "subject": extract_marc("600abcdq:610ab:650a:651a", trim_punctuation=True),
    "publisher": extract_marc("260b:264|*1|b", trim_punctuation=True),
}


def create_sample_record():
    """Create a sample record for the extraction demonstration."""
    record = Record(leader='00000nam a2200000 a 4500')
    record.add_field(
        Field(tag='001', data='ocm12345678'),
        Field(tag='008', data='200101s2020    nyu           000 0 eng d'),
        Field(tag='100', indicators=Indicators('1', ' '), subfields=[
            Subfield('a', 'Smith, Jane,'), Subfield('d', '1975-'),
        ]),
        Field(tag='245', indicators=Indicators('1', '0'), subfields=[
            Subfield('a', 'Systems programming :'),
            Subfield('b', 'a practical guide /'),
            Subfield('c', 'Jane Smith.'),
        ]),
        Field(tag='264', indicators=Indicators(' ', '1'), subfields=[
            Subfield('a', '[New York] :'), Subfield('b', 'Example Press,'), Subfield('c', '2020.'),
        ]),
        Field(tag='650', indicators=Indicators(' ', '0'), subfields=[
            Subfield('a', 'Computer programming.'),
        ]),
    )
    return record


def index_record(record, position):
    """Run every rule against one record and collect non-empty outputs."""
    context = Context(position=position)
    for name, rule in RULES.items():
        accumulator = []
        rule.run(record, accumulator, context)
        if accumulator:
            context.output_hash[name] = accumulator
    return context.output_hash


def main():
    if len(sys.argv) > 1:
        records = marc.read(sys.argv[1])
    else:
        records = [create_sample_record()]

    for position, record in enumerate(records):
        try:
            print(json.dumps(index_record(record, position), ensure_ascii=False))
        except ExtractionError as e:
            print(f"Skipping record {position}: {e}", file=sys.stderr)


if __name__ == '__main__':
    main()
