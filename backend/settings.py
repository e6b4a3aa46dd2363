import os

# Basic settings helper to read environment configuration.

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_ASSET_ROOT = "../frontend/dist"


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or val.strip() == "":
        return default
    return int(val)


class Settings:
    def __init__(self) -> None:
        self.HOST: str = os.getenv("BOOKSHELF_HOST", DEFAULT_HOST)
        self.PORT: int = _as_int(os.getenv("BOOKSHELF_PORT"), DEFAULT_PORT)
        self.ASSET_ROOT: str = os.getenv("BOOKSHELF_ASSET_ROOT", DEFAULT_ASSET_ROOT)
        self.LOG_LEVEL: str = os.getenv("BOOKSHELF_LOG_LEVEL", "info").lower()
        self.RELOAD: bool = _as_bool(os.getenv("BOOKSHELF_RELOAD"), False)


settings = Settings()
