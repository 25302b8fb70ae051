"""
Analytics Router
Per-user practice summary: topic mastery, accuracy by difficulty, library counts.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session as DBSession

from physics_tutor.database import get_db
from physics_tutor.models import User
from physics_tutor.routers.auth import get_current_user
from physics_tutor.tutor import memory

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("")
def get_analytics(user: User = Depends(get_current_user), db: DBSession = Depends(get_db)):
    return {
        "topic_mastery": memory.get_topic_mastery(db, user.id),
        "weakest_topic": memory.get_weakest_topic(db, user.id),
        "accuracy_by_difficulty": memory.get_accuracy_by_difficulty(db, user.id),
        "question_counts": memory.get_question_counts(db, user.id),
    }
