"""Root conftest — shared test configuration."""

import os

# Tests build their own Settings; keep the ambient default predictable
os.environ.setdefault("ENVIRONMENT", "production")
os.environ.setdefault("LOG_FORMAT", "text")
