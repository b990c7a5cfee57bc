"""Unit tests for import record parsing."""

import pytest

from userdir.database import ImportRecord, ImportRecordParser


class TestParseLine:
    def test_fields_trimmed_and_blanks_dropped(self):
        record = ImportRecordParser.parse_line("John Doe ;JohnDoe@unknow.com;abc:def;;")

        assert record == ImportRecord(full_name="John Doe", email="JohnDoe@unknow.com", salthash="abc:def")

    def test_phone_field(self):
        record = ImportRecordParser.parse_line(" Jane ; ; ; +79161234567 ")

        assert record.full_name == "Jane"
        assert record.email is None
        assert record.salthash is None
        assert record.phone == "+79161234567"

    def test_too_few_fields_rejected(self):
        with pytest.raises(ValueError, match="must have 4 fields"):
            ImportRecordParser.parse_line("John Doe;john@example.com")

    def test_parse_lines(self):
        records = ImportRecordParser.parse_lines(["A;a@x.com;s:h;", "B;b@x.com;s:h;"])
        assert [record.full_name for record in records] == ["A", "B"]


class TestReadFile:
    def test_reads_semicolon_file(self, tmp_path):
        path = tmp_path / "users.csv"
        path.write_text("John Doe ;JohnDoe@unknow.com;abc:def;;\nJane;;;+79161234567;\n", encoding="utf-8")

        records = ImportRecordParser.read_file(path)

        assert records == [
            ImportRecord(full_name="John Doe", email="JohnDoe@unknow.com", salthash="abc:def"),
            ImportRecord(full_name="Jane", phone="+79161234567"),
        ]

    def test_file_matches_in_memory_parsing(self, tmp_path):
        """Rows of different widths and stray quotes should parse as plain lines do."""
        lines = [
            "Jane Roe;;;+79161234567",
            "John Doe ;JohnDoe@unknow.com;abc:def;;",
            '"Jo Doe;jo@example.com;a:b;;',
            "Mary;mary@example.com;c:d;;;extra",
        ]
        path = tmp_path / "users.csv"
        path.write_text("\n".join(lines) + "\n\n", encoding="utf-8")

        assert ImportRecordParser.read_file(path) == ImportRecordParser.parse_lines(lines)

    def test_file_with_short_row_rejected(self, tmp_path):
        path = tmp_path / "users.csv"
        path.write_text("John Doe;john@example.com;a:b;\nJane;jane@example.com\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must have 4 fields"):
            ImportRecordParser.read_file(path)
