from fastapi import APIRouter, Depends, HTTPException

from portfolio.api.dependencies import get_store
from portfolio.api.schemas import ProjectOut
from portfolio.core.ports.store import ContentStore

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectOut])
async def list_projects(store: ContentStore = Depends(get_store)) -> list[ProjectOut]:
    return [ProjectOut.from_project(p) for p in store.list_projects()]


@router.get("/{slug}", response_model=ProjectOut)
async def get_project(slug: str, store: ContentStore = Depends(get_store)) -> ProjectOut:
    project = store.get_project(slug)
    if project is None:
        raise HTTPException(status_code=404, detail=f"Project {slug!r} not found.")
    return ProjectOut.from_project(project)
