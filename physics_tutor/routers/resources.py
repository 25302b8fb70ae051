"""
Resource Catalog Router
Read-only browsing for everyone; seeding and reset are admin-only.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session as DBSession

from physics_tutor.database import get_db
from physics_tutor.models import User
from physics_tutor.routers.auth import require_admin
from physics_tutor.catalog import (
    get_resource, list_children, search_resources, browse, seed_all, reset_catalog,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/resources", tags=["resources"])


# ─── Response Models ─────────────────────────────────────────────────────────

class ResourceOut(BaseModel):
    id: str
    parent_id: Optional[str] = None
    name: str
    type: str
    url: Optional[str] = None
    image_url: Optional[str] = None
    order: int
    source: Optional[str] = None

class SeedResultOut(BaseModel):
    source: str
    version: int
    deleted: int
    inserted: int
    skipped: bool

class ResetResponse(BaseModel):
    deleted: int
    seeds: list[SeedResultOut]
    message: str


def _seed_out(results) -> list[SeedResultOut]:
    return [
        SeedResultOut(
            source=r.source, version=r.version, deleted=r.deleted,
            inserted=r.inserted, skipped=r.skipped,
        )
        for r in results
    ]


# ─── Endpoints ───────────────────────────────────────────────────────────────

@router.get("", response_model=list[ResourceOut])
def get_resources(
    parent_id: Optional[str] = None,
    search: Optional[str] = None,
    db: DBSession = Depends(get_db),
):
    """Search when a term is given, otherwise the children of parent_id (roots by default)."""
    if search and search.strip():
        nodes = search_resources(db, search)
    else:
        nodes = list_children(db, parent_id)
    return [n.to_dict() for n in nodes]


@router.get("/tree")
def get_tree(search: str = Query(default=""), db: DBSession = Depends(get_db)):
    return browse(db, search)


@router.post("/seed", response_model=list[SeedResultOut])
def seed_resources(
    force: bool = False,
    admin: User = Depends(require_admin),
    db: DBSession = Depends(get_db),
):
    logger.info(f"Seeding catalog (force={force}) requested by {admin.id}")
    return _seed_out(seed_all(db, force=force))


@router.post("/reset", response_model=ResetResponse)
def reset_resources(admin: User = Depends(require_admin), db: DBSession = Depends(get_db)):
    logger.warning(f"Catalog reset requested by {admin.id}")
    deleted, results = reset_catalog(db)
    return ResetResponse(
        deleted=deleted,
        seeds=_seed_out(results),
        message="Resources have been successfully reset.",
    )


@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource_by_id(resource_id: str, db: DBSession = Depends(get_db)):
    node = get_resource(db, resource_id)
    if not node:
        raise HTTPException(404, "Resource not found")
    return node.to_dict()


@router.get("/{resource_id}/children", response_model=list[ResourceOut])
def get_children(resource_id: str, db: DBSession = Depends(get_db)):
    if not get_resource(db, resource_id):
        raise HTTPException(404, "Resource not found")
    return [n.to_dict() for n in list_children(db, resource_id)]
