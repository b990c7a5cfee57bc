"""In-memory user directory with password and phone access-code sign-in."""

from .auth import AccessCodeNotifier, DuplicateUserError, LoggingNotifier, UserDirectory
from .config import setup_logging
from .models import ByPassword, ByPhone, BySaltHash, User, make_user

__version__ = "1.0.0"
