"""
User Construction Requests and Factory

A user can come into existence three ways, each described by its own request
model:

    ByPassword  - email and a plain text password (self registration)
    BySaltHash  - email or phone with a precomputed ``salt:hash`` (import)
    ByPhone     - phone only; an access code is generated and sent

``make_user`` consumes any of them. ``select_request`` maps the loose keyword
arguments used by bulk import onto one of the three.
"""

import logging
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from ..auth.notifier import AccessCodeNotifier, LoggingNotifier, dispatch_access_code
from ..auth.password_utils import encrypt, generate_access_code, parse_salthash
from ..config.settings import META_CSV, META_PASSWORD, META_SMS
from ..utils.text_utils import is_blank, split_full_name
from .user import Identity, User

logger = logging.getLogger(__name__)


class ByPassword(BaseModel):
    kind: Literal["password"] = "password"
    full_name: str
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("password")
    @classmethod
    def password_present(cls, value: Optional[str]) -> str:
        if is_blank(value):
            raise ValueError("password or salthash must not be null or blank")
        return value


class BySaltHash(BaseModel):
    """Adopt an existing credential verbatim. When both are given, phone wins the login."""
    kind: Literal["salthash"] = "salthash"
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    salt: str = Field(min_length=1)
    password_hash: str = Field(min_length=1)

    @classmethod
    def from_pair(cls, full_name: str, salthash: str, email: Optional[str] = None,
                  phone: Optional[str] = None) -> "BySaltHash":
        salt, password_hash = parse_salthash(salthash)
        return cls(full_name=full_name, email=email, phone=phone, salt=salt, password_hash=password_hash)


class ByPhone(BaseModel):
    kind: Literal["phone"] = "phone"
    full_name: str
    phone: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("phone")
    @classmethod
    def phone_present(cls, value: Optional[str]) -> str:
        if is_blank(value):
            raise ValueError("phone or salthash must not be null or blank")
        return value


UserRequest = Annotated[Union[ByPassword, BySaltHash, ByPhone], Field(discriminator="kind")]

_request_adapter = TypeAdapter(UserRequest)


def parse_request(data: dict) -> Union[ByPassword, BySaltHash, ByPhone]:
    """Build a request from a plain mapping tagged with ``kind``."""
    return _request_adapter.validate_python(data)


def select_request(full_name: str, email: Optional[str] = None, password: Optional[str] = None,
                   phone: Optional[str] = None, salthash: Optional[str] = None):
    """
    Pick the construction path from loosely supplied arguments.

    Precedence:
        1. phone present -> BySaltHash when a salthash is also given, else ByPhone
        2. email and password -> ByPassword
        3. email and salthash -> BySaltHash

    Raises:
        ValueError: when none of the paths applies
    """
    if not is_blank(phone):
        if not is_blank(salthash):
            return BySaltHash.from_pair(full_name, salthash, phone=phone)
        return ByPhone(full_name=full_name, phone=phone)
    if not is_blank(email) and not is_blank(password):
        return ByPassword(full_name=full_name, email=email, password=password)
    if not is_blank(email) and not is_blank(salthash):
        return BySaltHash.from_pair(full_name, salthash, email=email)
    raise ValueError("Email and (phone or salthash) must not be null or blank")


def make_user(request: Union[ByPassword, BySaltHash, ByPhone],
              notifier: Optional[AccessCodeNotifier] = None) -> User:
    """
    Build a fully credentialed user from a construction request.

    Identity rules (first name, email or phone, phone format) are checked
    before any credential work, so an invalid request never sends a code.

    Args:
        request: one of ByPassword, BySaltHash, ByPhone
        notifier: where access codes go; defaults to LoggingNotifier

    Returns:
        User: with ``salt`` and ``password_hash`` always set

    Raises:
        ValueError: on any identity or credential validation failure
    """
    notifier = notifier or LoggingNotifier()
    first_name, last_name = split_full_name(request.full_name)

    if isinstance(request, ByPassword):
        identity = Identity(first_name=first_name, last_name=last_name, email=request.email)
        salt, password_hash = encrypt(request.password)
        user = User(**identity.model_dump(), salt=salt, password_hash=password_hash,
                    meta=dict(META_PASSWORD))

    elif isinstance(request, BySaltHash):
        if is_blank(request.phone):
            identity = Identity(first_name=first_name, last_name=last_name, email=request.email)
        else:
            identity = Identity(first_name=first_name, last_name=last_name, phone=request.phone)
        user = User(**identity.model_dump(), salt=request.salt, password_hash=request.password_hash,
                    meta=dict(META_CSV))

    elif isinstance(request, ByPhone):
        identity = Identity(first_name=first_name, last_name=last_name, phone=request.phone)
        code = generate_access_code()
        salt, password_hash = encrypt(code)
        user = User(**identity.model_dump(), salt=salt, password_hash=password_hash,
                    access_code=code, meta=dict(META_SMS))
        dispatch_access_code(notifier, user.phone, code)

    else:
        raise TypeError(f"Unsupported user request: {type(request).__name__}")

    user.attach_notifier(notifier)
    logger.debug(f"Built user {user.login} via {request.kind} request")
    return user
