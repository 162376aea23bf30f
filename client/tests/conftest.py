import sys
import os

import pytest

# project root = repo root (holds client/ and frontend/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from client.app.core.config import settings  # noqa: E402


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Pin display settings so a local .env cannot change expected output."""
    monkeypatch.setattr(settings, "display_timezone", "America/Chicago")
    monkeypatch.setattr(settings, "source_timezone", "UTC")
    monkeypatch.setattr(settings, "timestamp_format", "%Y-%m-%d %H:%M:%S")
    monkeypatch.setattr(settings, "timestamp_fields", "OrderIssueDate,RequestedShipByDate")
    monkeypatch.setattr(settings, "missing_sentinel", "N/A")
