from __future__ import annotations

from typing import List, Tuple


class RecordingNotifier:
    """Keeps every (phone, code) pair it is asked to send."""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    def send(self, phone: str, code: str) -> None:
        self.sent.append((phone, code))


class FailingNotifier:
    def send(self, phone: str, code: str) -> None:
        raise ConnectionError("sms gateway unreachable")
