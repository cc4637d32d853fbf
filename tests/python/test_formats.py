"""
Tests for reading and writing ISO 2709 files.
"""

import io

import pytest
from marcrules import ExtractionError, extract_marc
from marcrules.formats import marc

from conftest import create_linked_record, create_test_record


class TestMarcReadWrite:
    """Round trips through marcrules.formats.marc."""

    def test_write_returns_count(self, tmp_path):
        path = tmp_path / "records.mrc"
        count = marc.write([create_test_record(), create_linked_record()], path)
        assert count == 2
        assert path.stat().st_size > 0

    def test_round_trip_path(self, tmp_path):
        path = tmp_path / "records.mrc"
        marc.write([create_test_record(), create_linked_record()], str(path))
        records = list(marc.read(path))
        assert len(records) == 2
        assert records[0]["001"].data == "ocm12345678"
        assert records[1]["001"].data == "linked-1"

    def test_round_trip_file_object(self):
        buffer = io.BytesIO()
        marc.write([create_test_record()], buffer)
        assert not buffer.closed
        buffer.seek(0)
        records = list(marc.read(buffer))
        assert len(records) == 1

    def test_rules_on_read_records(self, tmp_path):
        """Test extraction gives the same values after a round trip."""
        path = tmp_path / "records.mrc"
        marc.write([create_test_record()], path)
        record = next(marc.read(path))
        rule = extract_marc("245ab", trim_punctuation=True)
        assert rule.values(record) == ["Systems programming : a practical guide"]
        assert extract_marc("008[35-37]", translation_map="marc_languages").values(record) == ["English"]

    def test_alternate_script_survives_round_trip(self, tmp_path):
        path = tmp_path / "linked.mrc"
        marc.write([create_linked_record()], path)
        record = next(marc.read(path))
        assert extract_marc("245a").values(record) == ["Sensō to heiwa", "戦争と平和"]

    def test_path_opened_on_first_record(self, tmp_path):
        """Test a path is not opened until iteration starts."""
        missing = tmp_path / "missing.mrc"
        records = marc.read(missing)
        with pytest.raises(FileNotFoundError):
            next(records)

    def test_unstarted_reader_can_be_closed(self, tmp_path):
        path = tmp_path / "records.mrc"
        marc.write([create_test_record()], path)
        records = marc.read(path)
        records.close()
        with pytest.raises(StopIteration):
            next(records)

    def test_partially_read_reader_closes_file(self, tmp_path):
        path = tmp_path / "records.mrc"
        marc.write([create_test_record(), create_linked_record()], path)
        records = marc.read(path)
        first_record = next(records)
        handle = records.gi_frame.f_locals["f"]
        records.close()
        assert first_record["001"].data == "ocm12345678"
        assert handle.closed

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.mrc"
        path.write_bytes(b"")
        assert list(marc.read(path)) == []

    def test_corrupt_record(self):
        with pytest.raises(ExtractionError):
            list(marc.read(io.BytesIO(b"00026" + b"x" * 20 + b"\x1d")))
