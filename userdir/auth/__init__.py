"""Authentication module."""

from .password_utils import encrypt, generate_access_code, generate_salt, hash_password, verify_password
from .notifier import AccessCodeNotifier, LoggingNotifier
from .user_directory import DuplicateUserError, UserDirectory
