"""
Named-environment configuration selection
"""

import pytest

from noteful.config.settings import ConfigurationError, DatabaseEnvironmentConfig


@pytest.fixture
def clean_db_env(monkeypatch):
    for name in ("DATABASE_URL", "TEST_DATABASE_URL", "DB_MIN_POOL_SIZE", "DB_MAX_POOL_SIZE", "DB_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestEnvironmentSelection:

    def test_suite_runs_under_test_environment(self, clean_db_env):
        settings = DatabaseEnvironmentConfig.get_config()

        assert settings.env_name == "test"

    def test_test_environment_uses_test_database(self, clean_db_env):
        test_settings = DatabaseEnvironmentConfig.get_config("test")
        dev_settings = DatabaseEnvironmentConfig.get_config("development")

        assert test_settings.database_name == "noteful-test"
        assert dev_settings.database_name == "noteful-app"
        assert test_settings.database_url != dev_settings.database_url

    def test_test_database_url_override(self, clean_db_env):
        clean_db_env.setenv("TEST_DATABASE_URL", "postgresql://ci:secret@db:5432/noteful-ci")

        settings = DatabaseEnvironmentConfig.get_config("test")

        assert settings.database_url == "postgresql://ci:secret@db:5432/noteful-ci"
        assert settings.database_name == "noteful-ci"

    def test_development_url_does_not_leak_into_test(self, clean_db_env):
        clean_db_env.setenv("DATABASE_URL", "postgresql://localhost/somewhere-else")

        assert DatabaseEnvironmentConfig.get_config("test").database_name == "noteful-test"
        assert DatabaseEnvironmentConfig.get_config("development").database_name == "somewhere-else"

    def test_environment_name_is_case_insensitive(self, clean_db_env):
        assert DatabaseEnvironmentConfig.get_config(" TEST ").env_name == "test"

    def test_active_environment_follows_env_variable(self, clean_db_env):
        clean_db_env.setenv("ENV", "development")

        assert DatabaseEnvironmentConfig.get_config().env_name == "development"


@pytest.mark.unit
class TestConfigurationErrors:

    def test_unknown_environment_rejected(self, clean_db_env):
        with pytest.raises(ConfigurationError, match="Unknown environment 'staging'"):
            DatabaseEnvironmentConfig.get_config("staging")

    def test_configuration_error_is_a_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_production_requires_connection_string(self, clean_db_env):
        with pytest.raises(ConfigurationError, match="production"):
            DatabaseEnvironmentConfig.get_config("production")

    def test_production_with_connection_string(self, clean_db_env):
        clean_db_env.setenv("DATABASE_URL", "postgresql://prod-host/noteful")

        settings = DatabaseEnvironmentConfig.get_config("production")

        assert settings.database_url == "postgresql://prod-host/noteful"
        assert settings.min_pool_size == 2
        assert settings.max_pool_size == 10
        assert settings.debug is False

    def test_inverted_pool_bounds_rejected(self, clean_db_env):
        clean_db_env.setenv("DB_MIN_POOL_SIZE", "8")
        clean_db_env.setenv("DB_MAX_POOL_SIZE", "2")

        with pytest.raises(ConfigurationError, match="DB_MIN_POOL_SIZE"):
            DatabaseEnvironmentConfig.get_config("test")

    @pytest.mark.parametrize("name", ["DB_MIN_POOL_SIZE", "DB_MAX_POOL_SIZE"])
    def test_non_integer_pool_size_rejected(self, clean_db_env, name):
        clean_db_env.setenv(name, "two")

        with pytest.raises(ConfigurationError, match=f"{name} must be an integer, got 'two'"):
            DatabaseEnvironmentConfig.get_config("test")


@pytest.mark.unit
class TestProfileOptions:

    def test_pool_bounds_from_environment(self, clean_db_env):
        clean_db_env.setenv("DB_MIN_POOL_SIZE", "3")
        clean_db_env.setenv("DB_MAX_POOL_SIZE", "7")

        settings = DatabaseEnvironmentConfig.get_config("test")

        assert (settings.min_pool_size, settings.max_pool_size) == (3, 7)

    def test_debug_defaults(self, clean_db_env):
        assert DatabaseEnvironmentConfig.get_config("development").debug is True
        assert DatabaseEnvironmentConfig.get_config("test").debug is False

    def test_debug_flag(self, clean_db_env):
        clean_db_env.setenv("DB_DEBUG", "yes")

        assert DatabaseEnvironmentConfig.get_config("test").debug is True
