"""
测试 config.py 与 main.py。
"""

import json

from fastapi.testclient import TestClient

from src.server.config import Config


def test_config_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONFIG_FILE", raising=False)
    cfg = Config()
    assert cfg.email_check_deliverability is False
    assert cfg.email_allow_smtputf8 is True
    assert cfg.cors_origins == ["*"]


def test_cors_origins_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert Config().cors_origins == ["https://a.example", "https://b.example"]

    monkeypatch.setenv("CORS_ORIGINS", '["https://c.example"]')
    assert Config().cors_origins == ["https://c.example"]


def test_config_json_file(monkeypatch, tmp_path):
    cfg_file = tmp_path / "custom.json"
    cfg_file.write_text(
        json.dumps({"email_check_deliverability": True, "unknown_key": 1}),
        encoding="utf-8",
    )
    monkeypatch.setenv("CONFIG_FILE", str(cfg_file))
    assert Config().email_check_deliverability is True


def test_env_overrides_config_json(monkeypatch, tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"app_title": "from-json"}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONFIG_FILE", raising=False)
    monkeypatch.setenv("APP_TITLE", "from-env")
    assert Config().app_title == "from-env"


def test_app_mounts_certificate_router():
    from src.server.main import app

    client = TestClient(app)
    response = client.post("/v1/certificate", json={"studentId": "anyId"})
    assert response.status_code == 400
    assert response.json()["param_name"] == "certificateId"
