"""Fixtures compartilhadas pelos testes do servidor"""

import pytest

from app.config import Config


@pytest.fixture
def ui_dir(tmp_path):
    """Diretório de recursos estáticos com welcome file e subdiretório"""
    root = tmp_path / "swagger-ui"
    root.mkdir()
    (root / "index.html").write_text("<html>swagger ui</html>")
    (root / "style.css").write_text("body { margin: 0; }")
    docs = root / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<html>docs</html>")
    (root / "empty").mkdir()
    return root


@pytest.fixture(autouse=True)
def test_config(monkeypatch, ui_dir):
    monkeypatch.setattr(Config, "UI_RESOURCE_DIR", str(ui_dir))
    monkeypatch.setattr(Config, "HOST", "127.0.0.1")
    monkeypatch.setattr(Config, "THREADS", 2)
    monkeypatch.setattr(Config, "LOG_LEVEL", 1)
    monkeypatch.setattr(Config, "LOG_FORMAT", "console")
    return Config


@pytest.fixture
def no_logging_setup(monkeypatch):
    """Evita que o LoggingModule troque os handlers do root logger durante os testes"""
    calls = []
    monkeypatch.setattr(
        "modules.logging_module.setup_logging",
        lambda level, fmt: calls.append((level, fmt)),
    )
    return calls
