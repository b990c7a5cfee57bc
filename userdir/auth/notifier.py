"""Access code delivery."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class AccessCodeNotifier(Protocol):
    """Delivers an access code to a phone number.

    Delivery is best effort: the caller never waits for confirmation and
    never sees a delivery failure.
    """

    def send(self, phone: str, code: str) -> None:
        ...


class LoggingNotifier:
    """Default notifier that only writes the send to the log."""

    def send(self, phone: str, code: str) -> None:
        logger.info(f"Sending access code {code} to {phone}")


def dispatch_access_code(notifier: AccessCodeNotifier, phone: str, code: str) -> None:
    """Hand a code to ``notifier``, logging and dropping any delivery error."""
    try:
        notifier.send(phone, code)
    except Exception as e:
        logger.warning(f"Access code delivery to {phone} failed: {e}")
