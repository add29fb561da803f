import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _as_list(value) -> list:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value or [])


def _get(key: str, default=None, cast=None):
    """Process environment overrides env.yaml"""
    value = os.environ.get(key, data.get(key, default))
    if value is None or cast is None:
        return value
    return cast(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./blog.db")
    CREATE_TABLES = _get("CREATE_TABLES", True, _as_bool)
    API_PREFIX = _get("API_PREFIX", "")
    API_PORT = _get("API_PORT", 8000, int)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", [], _as_list)
    CORS_ALLOW_CREDENTIALS = _get("CORS_ALLOW_CREDENTIALS", True, _as_bool)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO", str)
    ENABLE_LOGGING_MIDDLEWARE = _get("ENABLE_LOGGING_MIDDLEWARE", 1, _as_bool)
    # Required. create_app refuses to start without it.
    JWT_SECRET = _get("JWT_SECRET", None, str)
    JWT_ALGORITHM = _get("JWT_ALGORITHM", "HS256")
    JWT_TTL_SECONDS = _get("JWT_TTL_SECONDS", 24 * 60 * 60, int)
    BCRYPT_ROUNDS = _get("BCRYPT_ROUNDS", 12, int)
