# Test configuration
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def client():
    from src.main import app

    # Server errors must come back as 500 responses, not re-raised exceptions
    return TestClient(app, raise_server_exceptions=False)
