import os
from typing import List

from dotenv import load_dotenv

DEFAULT_POOL_SIZE = 5
DEFAULT_STARTUP_DELAY = 2.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_POOL_TIMEOUT = 30.0
DEFAULT_LOG_DIR = "logs"

HEALTH_MESSAGE = "Backend is healthy!"
SAVE_ACKNOWLEDGEMENT = "OK"

# what GET /tabs does when the database fails
LIST_POLICY_EMPTY = "empty"
LIST_POLICY_ERROR = "error"
LIST_FAILURE_POLICIES = (LIST_POLICY_EMPTY, LIST_POLICY_ERROR)

# what POST /tabs does when the database fails
SAVE_POLICY_RAISE = "raise"
SAVE_POLICY_ERROR = "error"
SAVE_FAILURE_POLICIES = (SAVE_POLICY_RAISE, SAVE_POLICY_ERROR)


class MissingConfigurationError(RuntimeError):
    pass


def reload_configuration():
    load_dotenv()


def database_url() -> str:
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise MissingConfigurationError("DATABASE_URL must be set")
    # SQLAlchemy only knows the "postgresql" scheme
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]
    return url


def pool_size() -> int:
    return int(os.environ.get("DB_POOL_SIZE", DEFAULT_POOL_SIZE))


def startup_delay() -> float:
    return float(os.environ.get("STARTUP_DELAY", DEFAULT_STARTUP_DELAY))


def origins() -> List[str]:
    return [
        origin.strip()
        for origin in os.environ.get("ORIGINS", "*").split(",")
        if origin.strip()
    ]


def _policy(key: str, default: str, allowed) -> str:
    value = os.environ.get(key, default).strip().lower()
    if value not in allowed:
        raise ValueError(
            f"Invalid {key} '{value}', allowed values are {list(allowed)}"
        )
    return value


def list_failure_policy() -> str:
    return _policy("LIST_FAILURE_POLICY", LIST_POLICY_EMPTY, LIST_FAILURE_POLICIES)


def save_failure_policy() -> str:
    return _policy("SAVE_FAILURE_POLICY", SAVE_POLICY_RAISE, SAVE_FAILURE_POLICIES)


def log_dir() -> str:
    return os.environ.get("LOG_DIR", DEFAULT_LOG_DIR)


# loggers are created at import time, so .env has to be loaded before them
reload_configuration()
