import sys
from pathlib import Path

import pytest

# Make the flat top-level modules importable when running pytest from the repo root
THIS_DIR = Path(__file__).resolve().parent
PROJECT_DIR = THIS_DIR.parent
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

import config  # noqa: E402


@pytest.fixture(autouse=True)
def reset_cached_thresholds(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "_alert_thresholds", None, raising=False)
    monkeypatch.delenv("TEMPDASH_BATTERY_HIGH_THRESHOLD", raising=False)
    monkeypatch.delenv("TEMPDASH_DIFFERENTIAL_THRESHOLD", raising=False)
