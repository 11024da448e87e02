"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from race_elo import rank_race

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Sample data fixtures ─────────────────────────────────────────────────────

RACE_TEXT = """\
Carol
(Penalties: 0)
1\t50.000 [1]
2\t50.050 [1]
3\t50.150 [1]
4\t50.900 [1]
Dan
(Penalties: 2)
1\t49.500 [2]
2\t49.750 [2]
3\t50.500 [2]
Eve
(Penalties: 0)
1\t51.000 [3]
2\t51.000 [3]
Finn
(Penalties: 0)
1\t52.000 [4]
2\t53.000 [4]
"""


@pytest.fixture
def race_text() -> str:
    return RACE_TEXT


@pytest.fixture
def sample_stats():
    """Ranked stats for four drivers: Carol, Dan, Eve, Finn."""
    return rank_race(RACE_TEXT)


@pytest.fixture
def mock_st():
    """The streamlit stand-in, with sidebar calls reset between tests."""
    _mock_st.reset_mock()
    _mock_st.sidebar.checkbox.side_effect = None
    _mock_st.sidebar.slider.side_effect = None
    return _mock_st
