from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def number_format_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default number-format settings."""

    monkeypatch.delenv("GEOURI_COORDINATE_DIGITS", raising=False)
    monkeypatch.delenv("GEOURI_PARAMETER_DIGITS", raising=False)
