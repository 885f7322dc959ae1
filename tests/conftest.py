import os
import sys
from datetime import datetime, timezone

import pytest

# Set before importing anything that instantiates Settings, so a developer's
# real key never turns tests into live LLM calls
os.environ["OPENAI_API_KEY"] = ""
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Ensure project root is in pythonpath
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

FROZEN_NOW = datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now():
    return FROZEN_NOW


@pytest.fixture
def clock():
    """A clock that always reads FROZEN_NOW."""
    return lambda: FROZEN_NOW
