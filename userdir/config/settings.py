"""Directory settings and constants."""

import re

# Credential engine
SALT_LENGTH = 16  # bytes of randomness, rendered as 32 hex characters
ACCESS_CODE_LENGTH = 6
ACCESS_CODE_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
)

# Phone numbers
PHONE_PATTERN = re.compile(r"^\+\d{11}$")
PHONE_STRIP_PATTERN = re.compile(r"[^+\d]")

# Import record format
IMPORT_FIELD_SEPARATOR = ";"
SALTHASH_SEPARATOR = ":"
IMPORT_FIELDS = ("full_name", "email", "salthash", "phone")

# Provenance recorded on every user
META_PASSWORD = {"auth": "password"}
META_SMS = {"auth": "sms"}
META_CSV = {"src": "csv"}

LOGGER_NAME = "userdir"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
