import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the config file and user preset folder at a scratch directory."""
    from lomofilter.utils import config, presets

    home = tmp_path / "home"
    monkeypatch.setattr(config, "CFG_DIR", str(home))
    monkeypatch.setattr(config, "CFG_PATH", str(home / "config.json"))
    monkeypatch.setattr(presets, "USER_PRESETS_DIR", str(home / "presets"))
    return home
