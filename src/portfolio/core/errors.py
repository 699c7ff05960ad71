from pathlib import Path


class ContentError(Exception):
    """Raised when a content file cannot be loaded."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(f"{self.path}: {message}" if self.path is not None else message)


class FrontmatterError(ContentError):
    """Raised when a front-matter block is missing or malformed."""
