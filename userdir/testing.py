"""Test-only helpers. Not imported by the package itself."""

from .auth.user_directory import UserDirectory


def reset_directory(directory: UserDirectory) -> None:
    """Remove every user from ``directory``."""
    with directory._lock:
        directory._users.clear()
