"""
Pytest configuration for prime-families tests.

Automatically adds project root to sys.path so that 'from primefamilies...'
imports work. Defines markers and shared fixtures.
"""
import sys
import threading
import pytest
from pathlib import Path
from typing import List, Tuple

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from primefamilies.core.config.settings import LockGranularity, reset_settings
from primefamilies.core.connectors.inmemory_cache import InMemoryCache
from primefamilies.modules.families.memo import MemoCache, reset_memo_cache


# =============================================================================
# Pytest Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Multi-threaded end-to-end tests")
    config.addinivalue_line("markers", "slow: Slow tests (large ranges)")


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Return project root path."""
    return PROJECT_ROOT


@pytest.fixture(autouse=True)
def clean_singletons(monkeypatch):
    """Fresh settings and process-wide memo cache for every test."""
    for var in ("LOG_LEVEL", "LOG_JSON", "CLIPBOARD_ENABLED",
                "MEMO_LOCK_GRANULARITY", "STREAM_WORKER_DAEMON"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    reset_memo_cache()
    yield
    reset_settings()
    reset_memo_cache()


@pytest.fixture
def memo_cache() -> MemoCache:
    """Isolated per-key memo cache."""
    return MemoCache(store=InMemoryCache(), granularity=LockGranularity.PER_KEY)


class RecordingObserver:
    """ProgressObserver that keeps every call in order."""

    def __init__(self):
        self._lock = threading.Lock()
        self.events: List[Tuple[str, object]] = []
        self.text = ""
        self.progress = 0.0

    def append_text(self, text: str) -> None:
        with self._lock:
            self.events.append(("append", text))
            self.text += text

    def replace_text(self, text: str) -> None:
        with self._lock:
            self.events.append(("replace", text))
            self.text = text

    def set_progress(self, fraction: float) -> None:
        with self._lock:
            self.events.append(("progress", fraction))
            self.progress = fraction

    def progress_values(self) -> List[float]:
        return [value for name, value in self.events if name == "progress"]


class CountingSurface:
    """RenderSurface counting redraw requests; optional hook per redraw."""

    def __init__(self, on_redraw=None):
        self.redraws = 0
        self._on_redraw = on_redraw

    def request_redraw(self) -> None:
        self.redraws += 1
        if self._on_redraw is not None:
            self._on_redraw(self.redraws)


@pytest.fixture
def recording_observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def counting_surface() -> CountingSurface:
    return CountingSurface()


@pytest.fixture
def make_surface():
    """Factory for CountingSurface with a redraw hook."""
    return CountingSurface
