from hashmatch.app import App, create_app
from hashmatch.config.settings import Environment, LogLevel, Settings
from hashmatch.infrastructure.logging import get_logger, is_configured


def test_create_app_uses_default_settings():
    app = create_app()
    assert isinstance(app, App)
    assert isinstance(app.settings, Settings)
    assert app.settings.environment == Environment.DEVELOPMENT
    assert app.settings.log_level == LogLevel.WARNING


def test_create_app_with_custom_settings(test_settings):
    """Test create_app with custom settings using fixture."""
    app = create_app(settings=test_settings)
    assert app.settings is test_settings
    assert app.settings.environment == Environment.TESTING
    assert app.settings.log_level == LogLevel.CRITICAL


def test_create_app_configures_logging():
    """create_app configures logging (autouse fixture gives a clean state)."""
    assert is_configured() is False
    _ = create_app()
    assert is_configured() is True


def test_get_logger_after_create_app(test_settings):
    create_app(settings=test_settings)
    logger = get_logger(__name__)
    logger.critical("wired")
    assert is_configured() is True
