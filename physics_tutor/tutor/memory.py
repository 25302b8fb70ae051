"""
Memory (Topic Mastery Read/Write)
Updates a user's long-term topic data after every practice attempt.
Also reads the aggregates behind the analytics page.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, case
from sqlalchemy.orm import Session as DBSession

from physics_tutor.config import MASTERY_DECAY, DIFFICULTIES
from physics_tutor.models import TopicMastery, Question, QuestionAttempt


# ─── Write ───────────────────────────────────────────────────────────────────

def record_attempt(db: DBSession, user_id: str, question: Question, correct: bool) -> TopicMastery:
    """
    Store an attempt and update mastery for the question's topic.
    Creates the mastery row if it doesn't exist.

    Mastery formula: exponential moving average
    new_score = old_score * 0.7 + (1.0 if correct else 0.0) * 0.3
    """
    db.add(QuestionAttempt(user_id=user_id, question_id=question.id, correct=correct))

    row = (
        db.query(TopicMastery)
        .filter(TopicMastery.user_id == user_id, TopicMastery.topic == question.topic)
        .first()
    )
    if not row:
        row = TopicMastery(
            user_id=user_id,
            topic=question.topic,
            mastery_score=0.0,
            attempts=0,
            correct=0,
        )
        db.add(row)

    row.attempts += 1
    if correct:
        row.correct += 1

    score_input = 1.0 if correct else 0.0
    row.mastery_score = row.mastery_score * MASTERY_DECAY + score_input * (1 - MASTERY_DECAY)
    row.last_attempted = datetime.now(timezone.utc)

    db.commit()
    return row


# ─── Read ────────────────────────────────────────────────────────────────────

def get_topic_mastery(db: DBSession, user_id: str) -> list[dict]:
    rows = (
        db.query(TopicMastery)
        .filter(TopicMastery.user_id == user_id)
        .order_by(TopicMastery.topic.asc())
        .all()
    )
    return [
        {
            "topic": r.topic,
            "mastery_score": round(r.mastery_score, 4),
            "attempts": r.attempts,
            "correct": r.correct,
            "last_attempted": r.last_attempted,
        }
        for r in rows
    ]


def get_weakest_topic(db: DBSession, user_id: str) -> Optional[str]:
    row = (
        db.query(TopicMastery)
        .filter(TopicMastery.user_id == user_id, TopicMastery.attempts > 0)
        .order_by(TopicMastery.mastery_score.asc())
        .first()
    )
    return row.topic if row else None


def get_accuracy_by_difficulty(db: DBSession, user_id: str) -> list[dict]:
    correct_sum = func.sum(case((QuestionAttempt.correct.is_(True), 1), else_=0))
    rows = (
        db.query(Question.difficulty, func.count(QuestionAttempt.id), correct_sum)
        .join(Question, Question.id == QuestionAttempt.question_id)
        .filter(QuestionAttempt.user_id == user_id)
        .group_by(Question.difficulty)
        .all()
    )
    by_difficulty = {d: (attempts, correct or 0) for d, attempts, correct in rows}
    result = []
    for difficulty in DIFFICULTIES:
        attempts, correct = by_difficulty.get(difficulty, (0, 0))
        result.append({
            "difficulty": difficulty,
            "attempts": attempts,
            "correct": correct,
            "accuracy": round(correct / attempts, 4) if attempts else None,
        })
    return result


def get_question_counts(db: DBSession, user_id: str) -> dict:
    def _counts(column) -> dict:
        rows = (
            db.query(column, func.count(Question.id))
            .filter(Question.created_by == user_id)
            .group_by(column)
            .all()
        )
        return {key: count for key, count in rows}

    return {
        "by_type": _counts(Question.question_type),
        "by_topic": _counts(Question.topic),
        "by_difficulty": _counts(Question.difficulty),
    }
