from tourism_api.app.core import config
from tourism_api.app.core.config import Settings


def test_split_csv_drops_blanks():
    assert config._split_csv(" http://a , ,http://b,") == ["http://a", "http://b"]


def test_env_bool(monkeypatch):
    monkeypatch.setenv("SEED_DEMO_DATA", "Yes")
    assert config._env_bool("SEED_DEMO_DATA", "false") is True
    monkeypatch.setenv("SEED_DEMO_DATA", "0")
    assert config._env_bool("SEED_DEMO_DATA", "true") is False
    monkeypatch.delenv("SEED_DEMO_DATA")
    assert config._env_bool("SEED_DEMO_DATA", "true") is True


def test_settings_defaults_can_be_overridden():
    cfg = Settings(api_prefix="/v2", seed_demo_data=False)
    assert cfg.api_prefix == "/v2"
    assert cfg.seed_demo_data is False
    assert isinstance(cfg.allowed_origins, list)
