import os


def get_settings_module() -> str:
    # Environment is taken from APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "tutor_tracker.config.production"

    if env in {"test", "testing"}:
        return "tutor_tracker.config.testing"

    return "tutor_tracker.config.development"
