import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./access_gate.db")
    API_PORT = data.get("API_PORT", 3001)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    ADMIN_SESSION_TTL_DAYS = int(data.get("ADMIN_SESSION_TTL_DAYS", 30))
    DEAN_SESSION_TTL_DAYS = int(data.get("DEAN_SESSION_TTL_DAYS", 365))
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 10))
    ACCESS_KEY_DEFAULT_VALIDITY_DAYS = int(data.get("ACCESS_KEY_DEFAULT_VALIDITY_DAYS", 1))
    MASTER_KEY_MIN_LENGTH = int(data.get("MASTER_KEY_MIN_LENGTH", 8))
