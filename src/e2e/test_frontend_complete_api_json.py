from pathlib import Path
import pytest
from notehint.engine import Engine
from notehint.models import SearchConfiguration
from notehint.sources import make_source
from frontend.web import app as flask_app

def _seed(tmp: Path) -> str:
    root = tmp / "Vault"; root.mkdir()
    for name in ("OB相关插件", "插件 for OB", "Unrelated"):
        (root / f"{name}.md").write_text("", encoding="utf-8")
    return str(root)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    import frontend.web as webmod
    eng = Engine(SearchConfiguration(), make_source(f"vault://{_seed(tmp_path)}"))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_frontend_complete_api_json(client):
    rv = client.get("/api/complete?q=OB%20%E6%8F%92%E4%BB%B6")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["search_term"] == "OB 插件"
    assert data["total"] == 2
    assert [(m["display_name"], m["score"]) for m in data["matches"]] == [("OB相关插件", 80), ("插件 for OB", 60)]
    for key in ("identifier", "display_name", "path", "score"):
        assert key in data["matches"][0]

@pytest.mark.e2e
def test_frontend_short_query_is_null(client):
    rv = client.get("/api/complete?q=O")
    assert rv.status_code == 200
    assert rv.get_json() is None

@pytest.mark.e2e
def test_frontend_health_and_home(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json()["ok"] is True
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<input" in html and "existing note" in html
