"""Utilities module."""

from .iterables import drop_last_until
from .text_utils import is_blank, normalize_phone, split_full_name, to_none_if_empty
