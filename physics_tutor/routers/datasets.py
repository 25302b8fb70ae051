"""
Dataset Catalog Router
External question sources, with notes on how well each fits AP Physics C.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session as DBSession

from physics_tutor.content.datasets import DEFAULT_DATASETS
from physics_tutor.database import get_db
from physics_tutor.models import Dataset, User
from physics_tutor.routers.auth import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/datasets", tags=["datasets"])


class DatasetRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1, max_length=500)
    description: str
    question_types: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
    strengths: str = ""
    limitations: str = ""

class DatasetOut(DatasetRequest):
    id: str
    created_at: datetime

class InitializeResponse(BaseModel):
    inserted: int


def _dataset_out(d: Dataset) -> DatasetOut:
    return DatasetOut(
        id=d.id,
        name=d.name,
        url=d.url,
        description=d.description,
        question_types=d.question_types or [],
        topics=d.topics or [],
        strengths=d.strengths,
        limitations=d.limitations,
        created_at=d.created_at,
    )


@router.post("", response_model=DatasetOut, status_code=201)
def add_dataset(
    req: DatasetRequest,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    dataset = Dataset(**req.model_dump(), added_by=user.id)
    db.add(dataset)
    db.commit()
    return _dataset_out(dataset)


@router.get("", response_model=list[DatasetOut])
def list_datasets(db: DBSession = Depends(get_db)):
    rows = db.query(Dataset).order_by(Dataset.created_at.desc()).all()
    return [_dataset_out(d) for d in rows]


@router.post("/initialize", response_model=InitializeResponse)
def initialize_datasets(user: User = Depends(get_current_user), db: DBSession = Depends(get_db)):
    """Insert the default datasets, only into an empty table."""
    if db.query(Dataset).count() > 0:
        return InitializeResponse(inserted=0)

    for entry in DEFAULT_DATASETS:
        db.add(Dataset(**entry, added_by=user.id))
    db.commit()
    logger.info(f"Initialized {len(DEFAULT_DATASETS)} default datasets")
    return InitializeResponse(inserted=len(DEFAULT_DATASETS))
