"""Shared test setup. api.main builds its app at import, so start from a clean environment."""

import os

_ENV_VARS = (
    "CONTACTS_HOST",
    "CONTACTS_PORT",
    "CONTACTS_ASSETS_DIR",
    "CONTACTS_TEMPLATES_DIR",
    "CONTACTS_SEED",
    "LOG_LEVEL",
)


def pytest_configure(config):
    for name in _ENV_VARS:
        os.environ.pop(name, None)
