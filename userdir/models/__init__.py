"""Data models."""

from .requests import ByPassword, ByPhone, BySaltHash, make_user, parse_request, select_request
from .user import Identity, User
