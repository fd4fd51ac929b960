"""Root conftest — shared test configuration."""

import os

# Tests must not pick up a developer's .env overrides for these
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("HTTPS_REDIRECT", "false")
os.environ.setdefault("LOG_FORMAT", "json")
