"""Import record parsing."""

from .parsers import ImportRecord, ImportRecordParser
