import pytest

from tests.utils import RecordingNotifier
from userdir import UserDirectory
from userdir.testing import reset_directory


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def directory(notifier):
    """A fresh directory per test, emptied again on teardown."""
    directory = UserDirectory(notifier=notifier)
    yield directory
    reset_directory(directory)
