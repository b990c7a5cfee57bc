"""
User Directory - Registration, Login and Access Codes

This module provides the in-memory user directory. It handles registration by
email or phone, login by either identifier, access-code requests and bulk
import of precomputed credentials.

Key Features:
    - One directory instance per application, passed to whoever needs it
    - Unique lowercase login keys (email or normalized phone)
    - Thread-safe check-then-insert for registration and import
    - Access codes delivered through a pluggable notifier

Error Model:
    - Validation problems and duplicate logins raise ValueError
    - Lookup misses return None and never raise
    - Imports are not transactional: users inserted before a failing record stay
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..database.parsers import ImportRecord, ImportRecordParser
from ..models.requests import ByPassword, ByPhone, make_user, select_request
from ..models.user import User
from ..utils.text_utils import normalize_phone
from .notifier import AccessCodeNotifier, LoggingNotifier

# Set up module logger
logger = logging.getLogger(__name__)


class DuplicateUserError(ValueError):
    """Raised when a login is already taken."""


class UserDirectory:
    """
    Central user registry keyed by login.

    Every user built by the directory shares the directory's notifier, so
    access codes issued later (``request_access_code``) go through the same
    channel as the one sent at registration.

    Example:
        >>> directory = UserDirectory()
        >>> user = directory.register_user("John Doe", "John@Example.com", "secret")
        >>> user.login
        'john@example.com'
        >>> directory.login_user("john@example.com", "secret") is not None
        True
    """

    def __init__(self, notifier: Optional[AccessCodeNotifier] = None):
        self.notifier = notifier or LoggingNotifier()
        self._users: Dict[str, User] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, login: str) -> bool:
        return self.get_user(login) is not None

    def _insert(self, user: User, kind: str) -> User:
        with self._lock:
            if user.login in self._users:
                logger.warning(f"Registration failed - {kind} already exists: {user.login}")
                raise DuplicateUserError(f"A user with this {kind} already exists")
            self._users[user.login] = user
        return user

    def register_user(self, full_name: str, email: str, password: str) -> User:
        """
        Register a new user with email and password.

        Args:
            full_name (str): "First" or "First Last"
            email (str): Email address; its lowercase form becomes the login
            password (str): Plain text password (salted and hashed)

        Returns:
            User: The registered user

        Raises:
            ValueError: invalid name, email or password
            DuplicateUserError: the email is already registered
        """
        request = ByPassword(full_name=full_name, email=email, password=password)
        user = self._insert(make_user(request, self.notifier), "email")
        logger.info(f"Successfully registered new user: {user.login}")
        return user

    def register_user_by_phone(self, full_name: str, raw_phone: str) -> User:
        """
        Register a new user by phone number.

        The phone is normalized to ``+`` and 11 digits. An access code is
        generated, sent through the notifier and becomes the user's password.

        Note:
            The code is sent before the uniqueness check, so a duplicate phone
            still receives a code.

        Raises:
            ValueError: invalid name or phone number
            DuplicateUserError: the phone is already registered
        """
        request = ByPhone(full_name=full_name, phone=raw_phone)
        user = self._insert(make_user(request, self.notifier), "phone")
        logger.info(f"Successfully registered new user by phone: {user.login}")
        return user

    def get_user(self, login: str) -> Optional[User]:
        """Find a user by email (any case) or by phone in any formatting."""
        with self._lock:
            return self._users.get(login.lower()) or self._users.get(normalize_phone(login))

    def get_all_users(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def login_user(self, login: str, password: str) -> Optional[str]:
        """
        Authenticate by email or phone.

        Returns:
            Optional[str]: the user's info summary on success, None when the
            user is unknown or the password does not match
        """
        user = self.get_user(login)
        if user and user.check_password(password):
            logger.info(f"Successful authentication for user: {user.login}")
            return user.user_info

        logger.warning(f"Failed authentication attempt for login: {login}")
        return None

    def request_access_code(self, phone: str) -> None:
        """Issue and send a new access code; does nothing for unknown phones."""
        normalized_phone = normalize_phone(phone)
        with self._lock:
            user = self._users.get(normalized_phone)
        if user is None:
            logger.warning(f"Access code requested for unknown phone: {normalized_phone}")
            return
        user.new_access_code(normalized_phone)

    def import_record(self, record: ImportRecord) -> User:
        request = select_request(
            record.full_name,
            email=record.email,
            phone=record.phone,
            salthash=record.salthash,
        )
        return self._insert(make_user(request, self.notifier), "login")

    def import_users(self, lines: Iterable[str]) -> List[User]:
        """
        Import users from ``fullName;email;salt:hash;phone`` lines.

        Each line is parsed and inserted in order. If a line fails, users from
        earlier lines remain in the directory and the error propagates.

        Example:
            >>> directory = UserDirectory()
            >>> [user] = directory.import_users(["John Doe ;JohnDoe@unknow.com;abc:def;;"])
            >>> (user.login, user.salt, user.password_hash)
            ('johndoe@unknow.com', 'abc', 'def')
        """
        users = []
        for line in lines:
            users.append(self.import_record(ImportRecordParser.parse_line(line)))
        logger.info(f"Imported {len(users)} users")
        return users

    def import_users_from_file(self, path: Union[str, Path]) -> List[User]:
        """Import users from a semicolon-delimited file, same rules as ``import_users``."""
        users = [self.import_record(record) for record in ImportRecordParser.read_file(path)]
        logger.info(f"Imported {len(users)} users from {path}")
        return users
