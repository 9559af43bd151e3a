"""Tests for the YAML < .env < environment configuration loader."""

import pytest

from config.config import ConfigLoader

YAML = """
auth:
  jwt_secret: from-yaml
feed:
  per_page: 5
server:
  cors_origins:
    - http://localhost:3000
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("FEED_AUTH_JWT_SECRET", "FEED_FEED_PER_PAGE", "FEED_REDIS_ENABLED", "FEED_SERVER_CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)


def _loader(tmp_path, yaml_text=None):
    if yaml_text is not None:
        (tmp_path / "config.yaml").write_text(yaml_text, encoding="utf-8")
    return ConfigLoader(config_paths=[str(tmp_path)])


class TestConfigLoader:
    def test_yaml_values(self, tmp_path):
        config = _loader(tmp_path, YAML).read_config()

        assert config.auth.jwt_secret == "from-yaml"
        assert config.feed.per_page == 5
        assert config.server.cors_origins == ["http://localhost:3000"]
        assert config.auth.token_ttl == 3600
        assert config.auth.bcrypt_rounds == 12

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FEED_AUTH_JWT_SECRET", "from-env")
        monkeypatch.setenv("FEED_FEED_PER_PAGE", "3")
        monkeypatch.setenv("FEED_REDIS_ENABLED", "true")

        config = _loader(tmp_path, YAML).read_config()

        assert config.auth.jwt_secret == "from-env"
        assert config.feed.per_page == 3
        assert config.redis.enabled is True

    def test_env_list(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FEED_AUTH_JWT_SECRET", "k")
        monkeypatch.setenv("FEED_SERVER_CORS_ORIGINS", "http://a, http://b")

        config = _loader(tmp_path).read_config()

        assert config.server.cors_origins == ["http://a", "http://b"]

    def test_missing_secret_fails(self, tmp_path):
        with pytest.raises(ValueError, match="auth.jwt_secret is required"):
            _loader(tmp_path).read_config()

    def test_non_positive_page_size_fails(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FEED_AUTH_JWT_SECRET", "k")
        monkeypatch.setenv("FEED_FEED_PER_PAGE", "0")

        with pytest.raises(ValueError, match="feed.per_page must be positive"):
            _loader(tmp_path).read_config()
