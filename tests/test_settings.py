"""
配置测试
"""
from config.settings import DEFAULT_DEV_API_URL, get_settings


class TestSettings:
    """API地址解析"""

    def test_development_falls_back_to_local_backend(self, monkeypatch):
        monkeypatch.delenv("ADMIN_API_URL", raising=False)

        assert get_settings("development").resolved_api_url == DEFAULT_DEV_API_URL

    def test_production_falls_back_to_same_origin(self, monkeypatch):
        monkeypatch.delenv("ADMIN_API_URL", raising=False)

        settings = get_settings("production")

        assert settings.resolved_api_url == ""
        assert settings.log_level == "WARNING"

    def test_configured_url_wins(self, monkeypatch):
        monkeypatch.setenv("ADMIN_API_URL", "https://api.shop.example/")

        assert get_settings("production").resolved_api_url == "https://api.shop.example"
        assert get_settings("development").resolved_api_url == "https://api.shop.example"

    def test_testing_profile(self):
        settings = get_settings("testing")

        assert settings.session_backend == "memory"
        assert settings.log_to_file is False

    def test_environment_read_from_env_file(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("ADMIN_ENVIRONMENT=production\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("ADMIN_ENVIRONMENT", raising=False)
        monkeypatch.delenv("ADMIN_API_URL", raising=False)

        settings = get_settings()

        assert settings.environment == "production"
        assert settings.resolved_api_url == ""
        assert settings.log_level == "WARNING"
        assert settings.debug is False

    def test_process_environment_overrides_env_file(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("ADMIN_ENVIRONMENT=production\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ADMIN_ENVIRONMENT", "testing")

        settings = get_settings()

        assert settings.environment == "testing"
        assert settings.session_backend == "memory"
