import os
from datetime import timedelta

from dotenv import load_dotenv

# Load .env from project root so local development settings are picked up
load_dotenv()


class Config:
    APP_NAME = "task-api"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Flask REST API template with a Task resource"

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-this-jwt-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_EXPIRES_HOURS", "24")))

    ENV = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
    TESTING = False
    JSON_SORT_KEYS = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO" if ENV == "production" else "DEBUG")

    CORS_ORIGINS = [o.strip() for o in os.environ.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

    # "memory" keeps tasks in-process; "database" uses DATABASE_URL
    TASK_STORE = os.environ.get("TASK_STORE", "memory")
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///database.sqlite")
    SQL_ECHO = os.environ.get("SQL_ECHO", "0") == "1"
    SEED_SAMPLE_TASKS = os.environ.get("SEED_SAMPLE_TASKS", "0") == "1"

    AUTH_REQUIRED = os.environ.get("AUTH_REQUIRED", "0") == "1"
    DEFAULT_USER_ID = os.environ.get("DEFAULT_USER_ID", "1")

    JSONPLACEHOLDER_BASE_URL = os.environ.get(
        "JSONPLACEHOLDER_BASE_URL", "https://jsonplaceholder.typicode.com"
    )
    JSONPLACEHOLDER_TIMEOUT = float(os.environ.get("JSONPLACEHOLDER_TIMEOUT", "10"))


class TestingConfig(Config):
    ENV = "testing"
    DEBUG = False
    TESTING = True
    LOG_LEVEL = "WARNING"
    JWT_SECRET_KEY = "testing-jwt-secret-with-enough-length"
    TASK_STORE = "memory"
    DATABASE_URL = "sqlite://"
    SEED_SAMPLE_TASKS = False
    AUTH_REQUIRED = False
    DEFAULT_USER_ID = "1"
