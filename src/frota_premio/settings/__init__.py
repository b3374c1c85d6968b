import os


def get_settings_module() -> str:
    # Ambiente escolhido pela variável APP_ENV, padrão 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "frota_premio.settings.production"

    if env in {"test", "testing"}:
        return "frota_premio.settings.testing"

    return "frota_premio.settings.development"
