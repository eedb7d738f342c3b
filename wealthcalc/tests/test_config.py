from wealthcalc.config import DEFAULT_CORS_ORIGINS, Settings


def test_settings_default_when_environment_is_empty():
    settings = Settings.from_env({})

    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_settings_read_from_environment():
    settings = Settings.from_env(
        {
            "WEALTHCALC_CORS_ORIGINS": "https://calc.example.com, http://localhost:4175",
            "WEALTHCALC_LOG_LEVEL": "debug",
        }
    )

    assert settings.cors_origins == ("https://calc.example.com", "http://localhost:4175")
    assert settings.log_level == "DEBUG"


def test_app_registers_settings(app):
    assert app.config["SETTINGS"] == Settings()
