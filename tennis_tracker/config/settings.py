"""
Configuración Centralizada - Tennis Tracker
===========================================

Toda la configuración se lee de variables de entorno (.env) con valores
por defecto razonables.

Uso:
    from tennis_tracker.config.settings import Config

    Config.configure_logging()
    is_valid, errors, warnings = Config.validate()
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Cargar .env
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


class Config:
    """
    Configuración centralizada del sistema

    Todas las configuraciones se cargan desde variables de entorno (.env)
    con valores por defecto razonables.
    """

    # ==================== API-TENNIS ====================
    API_TENNIS_API_KEY = os.getenv("API_TENNIS_API_KEY", "")
    API_TENNIS_BASE_URL = os.getenv("API_TENNIS_BASE_URL", "https://api.api-tennis.com/tennis/")

    # Timeouts en segundos: (conexión, lectura)
    API_TENNIS_CONNECT_TIMEOUT = float(os.getenv("API_TENNIS_CONNECT_TIMEOUT", "10"))
    API_TENNIS_TIMEOUT = float(os.getenv("API_TENNIS_TIMEOUT", "60"))

    # Reintentos solo ante timeout, backoff 1s, 2s, 4s...
    API_TENNIS_MAX_RETRIES = int(os.getenv("API_TENNIS_MAX_RETRIES", "3"))

    # Zona horaria por defecto para fixtures/livescore (vacío = la de la API)
    DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "")

    # ==================== LOGGING ====================
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @classmethod
    def validate(cls, strict=False):
        """
        Valida que las configuraciones críticas estén presentes

        Args:
            strict: Si True, la falta de API key es un error.
                   Si False, solo una advertencia.

        Returns:
            tuple: (is_valid, errors_list, warnings_list)
        """
        errors = []
        warnings = []

        if not cls.API_TENNIS_API_KEY:
            if strict:
                errors.append("API_TENNIS_API_KEY no configurada")
            else:
                warnings.append("API_TENNIS_API_KEY no configurada (las peticiones fallarán)")

        if cls.API_TENNIS_MAX_RETRIES < 1:
            errors.append("API_TENNIS_MAX_RETRIES debe ser >= 1")

        if cls.API_TENNIS_TIMEOUT <= 0 or cls.API_TENNIS_CONNECT_TIMEOUT <= 0:
            errors.append("Los timeouts deben ser positivos")

        if not hasattr(logging, cls.LOG_LEVEL.upper()):
            warnings.append(f"LOG_LEVEL desconocido: {cls.LOG_LEVEL} (se usará INFO)")

        is_valid = len(errors) == 0

        return is_valid, errors, warnings

    @classmethod
    def configure_logging(cls, level=None):
        """Configura logging.basicConfig con el nivel y formato del .env"""
        level_name = (level or cls.LOG_LEVEL).upper()
        logging.basicConfig(
            level=getattr(logging, level_name, logging.INFO),
            format=cls.LOG_FORMAT,
        )

    @classmethod
    def print_config(cls, show_secrets=False):
        """
        Muestra la configuración actual

        Args:
            show_secrets: Si True, muestra el valor de la API key
        """
        print("\n" + "=" * 60)
        print("⚙️  CONFIGURACIÓN DEL SISTEMA")
        print("=" * 60)

        print(f"\n🔑 API-Tennis:")
        if show_secrets:
            print(f"   API_TENNIS_API_KEY: {cls.API_TENNIS_API_KEY or '❌ No configurada'}")
        else:
            print(
                f"   API_TENNIS_API_KEY: {'✅ Configurada' if cls.API_TENNIS_API_KEY else '❌ No configurada'}"
            )
        print(f"   Base URL: {cls.API_TENNIS_BASE_URL}")
        print(f"   Timeouts: {cls.API_TENNIS_CONNECT_TIMEOUT}s / {cls.API_TENNIS_TIMEOUT}s")
        print(f"   Reintentos: {cls.API_TENNIS_MAX_RETRIES}")
        print(f"   Timezone: {cls.DEFAULT_TIMEZONE or '(API)'}")

        print(f"\n📝 Logging:")
        print(f"   Nivel: {cls.LOG_LEVEL}")

        is_valid, errors, warnings = cls.validate(strict=False)

        print("\n" + "=" * 60)
        if is_valid:
            print("✅ CONFIGURACIÓN VÁLIDA")
        else:
            print("❌ ERRORES EN CONFIGURACIÓN:")
            for error in errors:
                print(f"   - {error}")

        if warnings:
            print("\n⚠️  ADVERTENCIAS:")
            for warning in warnings:
                print(f"   - {warning}")

        print("=" * 60)

        return is_valid


# Template para .env
ENV_TEMPLATE = """# ===========================================
# Tennis Tracker - Configuración
# ===========================================

# API-Tennis (https://api-tennis.com)
API_TENNIS_API_KEY=tu_api_key_aqui
API_TENNIS_BASE_URL=https://api.api-tennis.com/tennis/
API_TENNIS_CONNECT_TIMEOUT=10
API_TENNIS_TIMEOUT=60
API_TENNIS_MAX_RETRIES=3

# Zona horaria por defecto (ej: Europe/Madrid). Vacío = la de la API
DEFAULT_TIMEZONE=

# Logging
LOG_LEVEL=INFO
"""


if __name__ == "__main__":
    print("🎾 Tennis Tracker - Configuración Centralizada\n")

    is_valid = Config.print_config(show_secrets=False)

    if not is_valid:
        print("\n💡 Tip: Copia .env.template a .env y configura tus valores")

        create_template = input("\n¿Crear .env.template? (s/n): ").lower()
        if create_template == "s":
            with open(".env.template", "w") as f:
                f.write(ENV_TEMPLATE)
            print("✅ .env.template creado")
