"""Parsers for bulk user import records."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel

from ..config.settings import IMPORT_FIELD_SEPARATOR, IMPORT_FIELDS
from ..utils.text_utils import to_none_if_empty

logger = logging.getLogger(__name__)


class ImportRecord(BaseModel):
    """One parsed ``fullName;email;salt:hash;phone`` line."""
    full_name: str
    email: Optional[str] = None
    salthash: Optional[str] = None
    phone: Optional[str] = None


class ImportRecordParser:
    """Parser for semicolon-delimited user records."""

    @staticmethod
    def parse_fields(fields: List[str]) -> ImportRecord:
        """Build a record from raw field values; values are trimmed and empty ones dropped."""
        if len(fields) < len(IMPORT_FIELDS):
            raise ValueError(
                f"Import record must have {len(IMPORT_FIELDS)} fields "
                f"({', '.join(IMPORT_FIELDS)}), got {len(fields)}"
            )
        values = [str(field).strip() for field in fields[:len(IMPORT_FIELDS)]]
        full_name, email, salthash, phone = values
        return ImportRecord(
            full_name=full_name,
            email=to_none_if_empty(email),
            salthash=to_none_if_empty(salthash),
            phone=to_none_if_empty(phone),
        )

    @staticmethod
    def parse_line(line: str) -> ImportRecord:
        """Parse a single line; extra trailing fields are ignored."""
        return ImportRecordParser.parse_fields(line.split(IMPORT_FIELD_SEPARATOR))

    @staticmethod
    def parse_lines(lines: Iterable[str]) -> List[ImportRecord]:
        return [ImportRecordParser.parse_line(line) for line in lines]

    @staticmethod
    def read_file(path: Union[str, Path]) -> List[ImportRecord]:
        """
        Read records from a semicolon-delimited file without a header row.

        Blank lines are skipped; every other line goes through ``parse_line``,
        so a file imports exactly like the same lines passed in memory.
        """
        lines = [line for line in Path(path).read_text(encoding="utf-8").splitlines() if line.strip()]
        logger.info(f"Read {len(lines)} import rows from {path}")
        return ImportRecordParser.parse_lines(lines)
