"""
Pytest configuration and fixtures for marcrules tests.
"""

import pytest
from pymarc import Field, Indicators, Record, Subfield

from marcrules import TranslationMap


def create_field(tag, ind1=' ', ind2=' ', *subfields):
    """Helper to create a data field from alternating code/value pairs."""
    pairs = [Subfield(code=subfields[i], value=subfields[i + 1])
             for i in range(0, len(subfields), 2)]
    return Field(tag=tag, indicators=Indicators(ind1, ind2), subfields=pairs)


def create_control_field(tag, data):
    """Helper to create a control field."""
    return Field(tag=tag, data=data)


def create_test_record():
    """Create a bibliographic record with a spread of fields for extraction."""
    record = Record(leader='00000nam a2200000 a 4500')
    record.add_field(
        create_control_field('001', 'ocm12345678'),
        create_control_field('008', '200101s2020    nyu           000 0 eng d'),
        create_field('100', '1', ' ', 'a', 'Smith, Jane,', 'd', '1975-'),
        create_field('245', '1', '0',
                     'a', 'Systems programming :',
                     'b', 'a practical guide /',
                     'c', 'Jane Smith.'),
        create_field('260', ' ', ' ', 'a', '[New York] :', 'b', 'Example Press,', 'c', '2020.'),
        create_field('650', ' ', '0', 'a', 'Computer programming.', 'x', 'History.'),
        create_field('650', ' ', '7', 'a', 'Programmation.', '2', 'ram'),
        create_field('700', '1', ' ', 'a', 'Jones, Bob,', 'd', '1980-'),
    )
    return record


def create_linked_record():
    """Create a record whose 245 has an 880 alternate-script counterpart."""
    record = Record(leader='00000nam a2200000 a 4500')
    record.add_field(
        create_control_field('001', 'linked-1'),
        create_field('245', '1', '0', '6', '880-01', 'a', 'Sensō to heiwa'),
        create_field('880', '1', '0', '6', '245-01/$1', 'a', '戦争と平和'),
        create_field('880', '1', ' ', '6', '100-02/$1', 'a', 'トルストイ'),
    )
    return record


@pytest.fixture
def record():
    """A fresh bibliographic record for each test."""
    return create_test_record()


@pytest.fixture
def linked_record():
    """A record with 880 alternate-script fields."""
    return create_linked_record()


@pytest.fixture
def map_dir(tmp_path, monkeypatch):
    """A translation map directory placed first on the search path."""
    directory = tmp_path / "maps"
    directory.mkdir()
    monkeypatch.setenv("MARCRULES_TRANSLATION_MAPS", str(directory))
    TranslationMap.clear_cache()
    yield directory
    TranslationMap.clear_cache()
