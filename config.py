import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./practice.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "practice_session")
    # 0 issues tokens without an exp claim
    SESSION_TOKEN_EXPIRE_MINUTES = int(data.get("SESSION_TOKEN_EXPIRE_MINUTES", 60 * 24 * 7))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    RESET_CODE_TTL_MINUTES = int(data.get("RESET_CODE_TTL_MINUTES", 10))
    EMAIL_SERVICE_URL = data.get("EMAIL_SERVICE_URL", "")
    EMAIL_TIMEOUT_SECONDS = float(data.get("EMAIL_TIMEOUT_SECONDS", 10))
