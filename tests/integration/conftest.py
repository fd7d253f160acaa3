"""
Integration test conftest: load .env from the project root.

Integration tests call the live ScalePad API and are skipped unless
SCALEPAD_API_KEY is available (environment or .env file).
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Project root: tests/integration/conftest.py -> project root
_project_root = Path(__file__).resolve().parent.parent.parent
_env_path = _project_root / ".env"

if _env_path.exists():
    load_dotenv(_env_path)


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when no API key is configured."""
    if os.environ.get("SCALEPAD_API_KEY"):
        return
    skip = pytest.mark.skip(reason="SCALEPAD_API_KEY not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
