from portfolio.data.books import BOOKS
from portfolio.data.projects import PROJECTS

__all__ = ["BOOKS", "PROJECTS"]
