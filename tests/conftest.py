"""Pytest configuration for test suite."""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
# This ensures 'copywriter' can be imported in tests
project_root = Path(__file__).parent.parent.resolve()
project_root_str = str(project_root)

if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

os.environ.setdefault("PYTHONPATH", project_root_str)

from copywriter.core.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Run every test in template-fallback mode unless it configures a key itself."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def form_data():
    """JSON body as the form posts it."""
    return {
        "type": "tagline",
        "product": "Acme Suite",
        "targetAudience": "SMBs",
        "keyBenefits": "fast, cheap",
        "tone": "playful",
    }
