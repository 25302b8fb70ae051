"""
Tutor Chat Router
Conversations with the AP Physics C tutor. Replies stream as server-sent events
while being written to the stored model message chunk by chunk.
"""

import json
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import StreamingResponse
from openai import OpenAIError
from pydantic import BaseModel, Field
from sqlalchemy import func
from sqlalchemy.orm import Session as DBSession, sessionmaker

from physics_tutor.catalog import search_resources
from physics_tutor.config import (
    TUTOR_HISTORY_LIMIT, TUTOR_MAX_SUGGESTIONS, LLM_SHORT_MAX_TOKENS,
)
from physics_tutor.database import get_db, get_session_factory
from physics_tutor.models import Conversation, Message, User
from physics_tutor.routers.auth import get_current_user
from physics_tutor.tutor.llm import LLMProvider, get_llm
from physics_tutor.tutor.parsing import parse_search_queries
from physics_tutor.tutor.prompts import build_tutor_messages, build_search_query_messages

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tutor", tags=["tutor"])

INTERRUPTED_NOTE = "\n\n[The reply was interrupted. Please try again.]"


# ─── Request/Response Models ─────────────────────────────────────────────────

class ConversationRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)

class ConversationOut(BaseModel):
    id: str
    title: str
    created_at: datetime

class MessageRequest(BaseModel):
    text: str = Field(min_length=1, max_length=4000)

class MessageOut(BaseModel):
    id: str
    seq: int
    role: str
    text: str
    suggested_resource_ids: Optional[list[str]] = None
    created_at: datetime


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _sse(event: dict) -> str:
    return f"data: {json.dumps(event)}\n\n"


def _owned_conversation(db: DBSession, conversation_id: str, user: User) -> Conversation:
    conversation = db.get(Conversation, conversation_id)
    if not conversation or conversation.user_id != user.id:
        raise HTTPException(404, "Conversation not found")
    return conversation


def _recent_history(db: DBSession, conversation_id: str) -> list[dict]:
    rows = (
        db.query(Message)
        .filter(Message.conversation_id == conversation_id)
        .order_by(Message.seq.desc())
        .limit(TUTOR_HISTORY_LIMIT)
        .all()
    )
    return [{"role": m.role, "text": m.text} for m in reversed(rows)]


def _open_exchange(db: DBSession, conversation: Conversation, user: User, text: str) -> str:
    """Store the user turn and an empty model turn. Returns the model message id."""
    last_seq = (
        db.query(func.max(Message.seq))
        .filter(Message.conversation_id == conversation.id)
        .scalar()
    ) or 0
    user_turn = Message(
        conversation_id=conversation.id, user_id=user.id,
        seq=last_seq + 1, role="user", text=text,
    )
    model_turn = Message(
        conversation_id=conversation.id, user_id=user.id,
        seq=last_seq + 2, role="model", text="",
    )
    db.add_all([user_turn, model_turn])
    db.commit()
    return model_turn.id


def _append_text(db: DBSession, message_id: str, delta: str) -> None:
    message = db.get(Message, message_id)
    message.text = (message.text or "") + delta
    db.commit()


def suggest_resources(
    db: DBSession, llm: LLMProvider, user_text: str, reply: str, message_id: str,
) -> list[str]:
    """Ask the LLM for catalog search queries and keep the best hit of each."""
    try:
        result = llm.generate(
            build_search_query_messages(user_text, reply, TUTOR_MAX_SUGGESTIONS),
            max_tokens=LLM_SHORT_MAX_TOKENS,
        )
    except OpenAIError as e:
        logger.warning(f"Resource suggestions skipped for {message_id}: {e}")
        return []

    resource_ids = []
    for query in parse_search_queries(result.text, TUTOR_MAX_SUGGESTIONS):
        for node in search_resources(db, query, limit=TUTOR_MAX_SUGGESTIONS):
            if node.id not in resource_ids:
                resource_ids.append(node.id)
                break

    message = db.get(Message, message_id)
    message.suggested_resource_ids = resource_ids
    db.commit()
    logger.info(f"Suggested {len(resource_ids)} resources for message {message_id}")
    return resource_ids


# ─── Conversations ───────────────────────────────────────────────────────────

@router.post("/conversations", response_model=ConversationOut, status_code=201)
def create_conversation(
    req: ConversationRequest,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    conversation = Conversation(user_id=user.id, title=req.title.strip())
    db.add(conversation)
    db.commit()
    return ConversationOut(id=conversation.id, title=conversation.title, created_at=conversation.created_at)


@router.get("/conversations", response_model=list[ConversationOut])
def list_conversations(user: User = Depends(get_current_user), db: DBSession = Depends(get_db)):
    rows = (
        db.query(Conversation)
        .filter(Conversation.user_id == user.id)
        .order_by(Conversation.created_at.desc())
        .all()
    )
    return [ConversationOut(id=c.id, title=c.title, created_at=c.created_at) for c in rows]


@router.get("/conversations/{conversation_id}/messages", response_model=list[MessageOut])
def list_messages(
    conversation_id: str,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    conversation = _owned_conversation(db, conversation_id, user)
    return [
        MessageOut(
            id=m.id,
            seq=m.seq,
            role=m.role,
            text=m.text,
            suggested_resource_ids=m.suggested_resource_ids,
            created_at=m.created_at,
        )
        for m in conversation.messages
    ]


# ─── Streaming Reply ─────────────────────────────────────────────────────────

@router.post("/conversations/{conversation_id}/messages")
async def send_message(
    conversation_id: str,
    req: MessageRequest,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    llm: LLMProvider = Depends(get_llm),
):
    """
    Stream the tutor's reply.

    Events: {"type": "text"} per chunk, then {"type": "suggestions"} and
    {"type": "done"}. A failed stream ends with {"type": "error"} and the
    stored reply keeps whatever arrived plus an interruption note.
    """
    conversation = await run_in_threadpool(_owned_conversation, db, conversation_id, user)
    history = await run_in_threadpool(_recent_history, db, conversation_id)
    model_message_id = await run_in_threadpool(_open_exchange, db, conversation, user, req.text)
    messages = build_tutor_messages(history, req.text)

    async def reply_stream():
        stream_db = session_factory()
        try:
            reply = ""
            try:
                async for delta in llm.generate_streaming(messages):
                    reply += delta
                    await run_in_threadpool(_append_text, stream_db, model_message_id, delta)
                    yield _sse({"type": "text", "content": delta})
            except OpenAIError as e:
                logger.error(f"Tutor stream failed for conversation {conversation_id}: {e}")
                await run_in_threadpool(_append_text, stream_db, model_message_id, INTERRUPTED_NOTE)
                yield _sse({"type": "error", "content": INTERRUPTED_NOTE.strip()})
                return

            resource_ids = await run_in_threadpool(
                suggest_resources, stream_db, llm, req.text, reply, model_message_id
            )
            yield _sse({"type": "suggestions", "resource_ids": resource_ids})
            yield _sse({"type": "done", "message_id": model_message_id})
        finally:
            stream_db.close()

    return StreamingResponse(reply_stream(), media_type="text/event-stream")
