import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer HELLO_API_* variables out of unit tests."""
    for key in list(os.environ):
        if key.startswith("HELLO_API_"):
            monkeypatch.delenv(key)
