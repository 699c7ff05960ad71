from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint listing the content collections."""
    return {
        "meta": {
            "title": "Portfolio API",
            "description": "Read-only access to showcased projects, the reading list, and blog posts.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "projects": "/projects",
            "books": "/books",
            "posts": "/posts",
            "tags": "/tags",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
