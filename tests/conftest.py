import pytest

from assertkit.config import reset_settings
from assertkit.scope import CURRENT_SCOPE


@pytest.fixture(autouse=True)
def clean_assertkit_state(monkeypatch):
    """Give every test default settings and no ambient assertion scope."""
    for name in ("LAUNCH_DEBUGGER_ON_FAILURE", "LAUNCH_DEBUGGER_FILTER", "MAX_VALUE_REPR"):
        monkeypatch.delenv(f"ASSERTKIT_{name}", raising=False)
    reset_settings()
    token = CURRENT_SCOPE.set(None)
    yield
    CURRENT_SCOPE.reset(token)
    reset_settings()
