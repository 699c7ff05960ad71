from portfolio.store.filesystem import FileSystemContentStore
from portfolio.store.memory import InMemoryContentStore

__all__ = [
    "FileSystemContentStore",
    "InMemoryContentStore",
]
