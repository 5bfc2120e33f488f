import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the package directory or its parent
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _split(value):
    return [v.strip() for v in (value or "").split(",") if v.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Unset MONGO_URI means records live in memory for the process lifetime
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME') or 'splitledger'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    CORS_ORIGINS = _split(os.getenv('CORS_ORIGINS')) or [
        "http://localhost:5173",
        "http://localhost:8080",
    ]


class TestConfig(Config):
    TESTING = True
    MONGO_URI = None
    LOG_LEVEL = 'DEBUG'
