# src/e2e/test_integration_vault_complete.py
from pathlib import Path

import pytest

from notehint.engine import Engine
from notehint.models import SearchConfiguration
from notehint.sources import make_source
from notehint.sources.memory_store import MemorySource


def _seed(tmp: Path) -> Path:
    root = tmp / "Vault"
    (root / "Plugins").mkdir(parents=True)
    (root / ".obsidian").mkdir()
    (root / "Project A.md").write_text("# A\n", encoding="utf-8")
    (root / "Project B.md").write_text("# B\n", encoding="utf-8")
    (root / "Plugins" / "ProjectAlpha.md").write_text("# Alpha\n", encoding="utf-8")
    (root / ".obsidian" / "Project hidden.md").write_text("", encoding="utf-8")
    (root / "Project image.png").write_bytes(b"")
    return root


@pytest.mark.e2e
def test_vault_source_lists_notes(tmp_path: Path):
    root = _seed(tmp_path)
    cands = make_source(f"vault://{root}").list_candidates()
    assert [c.display_name for c in cands] == ["Project A", "Project B", "ProjectAlpha"]
    assert cands[2].path == "Plugins/ProjectAlpha.md"
    assert cands[2].identifier == cands[2].path


@pytest.mark.e2e
def test_prefixed_input_over_vault(tmp_path: Path):
    root = _seed(tmp_path)
    cfg = SearchConfiguration(prefix_tokens=("插件",), result_limit=2)
    eng = Engine(cfg, make_source(f"vault://{root}"))
    try:
        result = eng.complete("插件 Project")
        assert result.search_term == "Project"
        assert [m.candidate.display_name for m in result.matches] == ["Project A", "Project B"]
        assert result.truncated_count == 1
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_vault_reflects_new_files(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine(SearchConfiguration(), make_source(f"vault://{root}"))
    assert eng.complete("Beta") is not None
    assert eng.complete("Beta").total == 0
    (root / "Beta plan.md").write_text("", encoding="utf-8")
    assert eng.complete("Beta").total == 1


def test_vault_source_requires_directory(tmp_path: Path):
    with pytest.raises(ValueError):
        make_source(f"vault://{tmp_path / 'missing'}")


def test_unsupported_dsn():
    with pytest.raises(ValueError):
        make_source("sqlite:///x.db")


def test_memory_source_snapshot():
    src = MemorySource.from_names(["a", "b"])
    snap = src.list_candidates()
    src.add(snap[0])
    assert len(snap) == 2
    assert len(src.list_candidates()) == 3
