"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import nlscat.catalogs
import nlscat.config
from nlscat.config import NlsConfig


# =============================================================================
# PATH FIXTURES
# =============================================================================

@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def nls_dir(fixtures_dir):
    """Path to the per-locale catalog tree (<locale>/greet.cat)."""
    return fixtures_dir / "nls"


@pytest.fixture
def write_catalog(tmp_path):
    """Factory: write catalog bytes to a file under tmp_path, return its path."""
    def _write(content, name="test.cat"):
        if isinstance(content, str):
            content = content.encode("utf-8")
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path
    return _write


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def make_config(tmp_path):
    """Factory: NlsConfig over an explicit environment dict, ignoring any user config file."""
    def _make(environ=None, config_path=None):
        if config_path is None:
            config_path = tmp_path / "no-such-config.yaml"
        return NlsConfig(config_path=config_path, environ=dict(environ or {}))
    return _make


@pytest.fixture
def nls_config(make_config, nls_dir):
    """Config whose NLSPATH points at the fixture catalog tree."""
    return make_config({
        "NLSPATH": f"{nls_dir}/%L/%N.cat;{nls_dir}/%l.%c/%N.cat;{nls_dir}/%l/%N.cat",
        "LANG": "en_US.UTF-8",
    })


@pytest.fixture(autouse=True)
def fresh_defaults():
    """Reset module-level singletons between tests."""
    nlscat.config._config = None
    nlscat.catalogs._default_catalogs = None
    nlscat.catalogs._last_errno = 0
    yield
    nlscat.config._config = None
    nlscat.catalogs._default_catalogs = None
    nlscat.catalogs._last_errno = 0
