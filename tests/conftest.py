import pytest

_ENV_VARS = (
    "TABLELITE_COLUMN_SPACER",
    "TABLELITE_ALIGN",
    "TABLELITE_EASTASIAN",
    "LC_ALL",
    "LC_CTYPE",
    "LANG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the caller's locale and TABLELITE_* settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
