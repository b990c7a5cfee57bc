"""User data model."""

import logging
from functools import cached_property
from typing import Dict, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from ..auth.notifier import AccessCodeNotifier, LoggingNotifier, dispatch_access_code
from ..auth.password_utils import generate_access_code, hash_password, verify_password
from ..config.settings import PHONE_PATTERN
from ..utils.text_utils import is_blank, normalize_phone

logger = logging.getLogger(__name__)


class Identity(BaseModel):
    """Who a user is: names plus the email or phone their login comes from."""
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("first_name")
    @classmethod
    def first_name_not_blank(cls, value: str) -> str:
        if is_blank(value):
            raise ValueError("FirstName must not be blank")
        return value

    @field_validator("last_name", "email", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and is_blank(value):
            return None
        return value

    @field_validator("phone", mode="before")
    @classmethod
    def valid_phone(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            return value
        if is_blank(value):
            return None
        phone = normalize_phone(value)
        if not PHONE_PATTERN.match(phone):
            raise ValueError("Enter a valid phone number starting with a + and containing 11 digits")
        return phone

    @model_validator(mode="after")
    def email_or_phone(self):
        if self.email is None and self.phone is None:
            raise ValueError("Email or phone must not be null or blank")
        return self

    @property
    def login(self) -> str:
        """Directory key: the lowercased email, or the phone when there is no email."""
        return (self.email or self.phone).lower()

    @property
    def full_name(self) -> str:
        joined = " ".join(part for part in (self.first_name, self.last_name) if part).strip()
        return joined[:1].upper() + joined[1:]

    @property
    def initials(self) -> str:
        return " ".join(part[0].upper() for part in (self.first_name, self.last_name) if part)


class User(Identity):
    """
    User model for authentication.

    Instances are built by :func:`userdir.models.requests.make_user`, which
    picks the salt and password hash. ``salt`` never changes afterwards;
    ``password_hash`` changes on password change and whenever a new access
    code is issued.
    """
    salt: str = Field(repr=False, frozen=True)
    password_hash: str = Field(repr=False)
    access_code: Optional[str] = Field(default=None, repr=False)
    meta: Dict[str, str] = Field(default_factory=dict)

    _notifier: AccessCodeNotifier = PrivateAttr(default_factory=LoggingNotifier)

    def attach_notifier(self, notifier: AccessCodeNotifier) -> None:
        """Route future access codes for this user through ``notifier``."""
        self._notifier = notifier

    @cached_property
    def user_info(self) -> str:
        """Multi-line summary returned on successful login."""
        return "\n".join([
            f"first_name: {self.first_name}",
            f"last_name: {self.last_name}",
            f"login: {self.login}",
            f"full_name: {self.full_name}",
            f"initials: {self.initials}",
            f"email: {self.email}",
            f"phone: {self.phone}",
            f"meta: {self.meta}",
        ])

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.salt, self.password_hash)

    def change_password(self, old_password: str, new_password: str) -> None:
        """
        Replace the password after checking the current one.

        If the user signed in with an access code, ``access_code`` is
        overwritten with the new password rather than cleared.

        Raises:
            ValueError: if ``old_password`` does not match
        """
        if not self.check_password(old_password):
            logger.warning(f"Password change rejected for user: {self.login}")
            raise ValueError("The entered password does not match the current password")

        self.password_hash = hash_password(new_password, self.salt)
        if self.access_code:
            self.access_code = new_password
        logger.info(f"Password changed for user: {self.login}")

    def new_access_code(self, phone: str) -> None:
        """Issue a fresh access code, make it the password and send it to ``phone``."""
        code = generate_access_code()
        self.apply_access_code(code)
        dispatch_access_code(self._notifier, phone, code)
        logger.info(f"New access code issued for user: {self.login}")

    def apply_access_code(self, code: str) -> None:
        # The access code doubles as the password: it replaces the stored hash.
        self.password_hash = hash_password(code, self.salt)
        self.access_code = code
