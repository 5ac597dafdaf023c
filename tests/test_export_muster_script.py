import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "export_muster.py"


@pytest.fixture
def export_muster():
    spec = importlib.util.spec_from_file_location("export_muster", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("fmt", ["pdf", "txt"])
def test_unknown_format_is_refused(export_muster, monkeypatch, fmt):
    monkeypatch.setattr("sys.argv", ["export_muster.py", "2024-06", fmt])
    build = []
    monkeypatch.setattr(export_muster, "build_container", lambda **kwargs: build.append(kwargs))

    with pytest.raises(SystemExit, match=f"Unsupported format: {fmt}"):
        export_muster.main()
    assert build == []


def test_missing_month_prints_usage(export_muster, monkeypatch):
    monkeypatch.setattr("sys.argv", ["export_muster.py"])
    with pytest.raises(SystemExit, match="Usage"):
        export_muster.main()
