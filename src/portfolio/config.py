import os
from pathlib import Path

DEFAULT_CONTENT_DIR = "content/blog"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def get_content_dir() -> Path:
    return Path(os.getenv("PORTFOLIO_CONTENT_DIR", DEFAULT_CONTENT_DIR))


def watch_enabled() -> bool:
    return os.getenv("PORTFOLIO_WATCH", "").strip().lower() in _TRUTHY
