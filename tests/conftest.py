import os
import tempfile

# Avant tout import de config / PySide6
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["PASSGEN_DATA_DIR"] = tempfile.mkdtemp(prefix="passgen-tests-")
os.environ["PASSGEN_LOG_LEVEL"] = "INFO"

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class FakeClipboard:
    def __init__(self):
        self.text = None

    def setText(self, text):
        self.text = text


class BrokenClipboard:
    def setText(self, text):
        raise RuntimeError("clipboard unavailable")


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def broken_clipboard():
    return BrokenClipboard()
