"""
Question Router
Generate practice questions with the LLM, keep a personal library, and help
with a problem through hints, chat and diagrams.
"""

import logging
from datetime import datetime
from typing import Literal, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from openai import OpenAIError
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session as DBSession, sessionmaker

from physics_tutor.config import LLM_SHORT_MAX_TOKENS
from physics_tutor.content.topics import TOPICS
from physics_tutor.database import get_db, get_session_factory
from physics_tutor.models import Question, User
from physics_tutor.routers.auth import get_current_user
from physics_tutor.tutor import memory
from physics_tutor.tutor.llm import LLMProvider, get_llm
from physics_tutor.tutor.parsing import (
    LLMOutputError, parse_generated_question, extract_svg,
)
from physics_tutor.tutor.prompts import (
    build_question_messages, build_diagram_messages, build_hint_messages,
    build_problem_chat_messages,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/questions", tags=["questions"])

QuestionType = Literal["MCQ", "FRQ"]
Difficulty = Literal["easy", "medium", "hard"]


# ─── Request/Response Models ─────────────────────────────────────────────────

class GenerateRequest(BaseModel):
    topic: str = Field(min_length=1, max_length=100)
    question_type: QuestionType
    difficulty: Difficulty

class GeneratedQuestionOut(BaseModel):
    topic: str
    question_type: str
    difficulty: str
    question_text: str
    explanation: str
    choices: Optional[list[str]] = None
    correct_choice: Optional[str] = None
    answer: Optional[str] = None

class SaveQuestionRequest(BaseModel):
    topic: str = Field(min_length=1, max_length=100)
    question_type: QuestionType
    difficulty: Difficulty
    question_text: str = Field(min_length=1)
    explanation: str = Field(min_length=1)
    answer: Optional[str] = None
    choices: Optional[list[str]] = None
    correct_choice: Optional[str] = None
    diagram: Optional[str] = None
    generate_diagram: bool = True

class QuestionOut(BaseModel):
    id: str
    topic: str
    question_type: str
    difficulty: str
    question_text: str
    explanation: str
    answer: Optional[str] = None
    choices: Optional[list[str]] = None
    correct_choice: Optional[str] = None
    diagram: Optional[str] = None
    created_at: datetime

class HintRequest(BaseModel):
    hint_index: int = Field(default=0, ge=0, le=20)
    scratchpad: str = ""
    previous_hints: list[str] = Field(default_factory=list)

class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    question: str = Field(min_length=1)
    choices: Optional[list[str]] = None
    scratchpad: str = ""

class TextResponse(BaseModel):
    text: str

class AttemptRequest(BaseModel):
    correct: bool

class AttemptResponse(BaseModel):
    topic: str
    mastery_score: float
    attempts: int
    correct: int


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _question_out(q: Question) -> QuestionOut:
    return QuestionOut(
        id=q.id,
        topic=q.topic,
        question_type=q.question_type,
        difficulty=q.difficulty,
        question_text=q.question_text,
        explanation=q.explanation,
        answer=q.answer,
        choices=q.choices,
        correct_choice=q.correct_choice,
        diagram=q.diagram,
        created_at=q.created_at,
    )


def _owned_question(db: DBSession, question_id: str, user: User) -> Question:
    question = db.get(Question, question_id)
    if not question or question.created_by != user.id:
        raise HTTPException(404, "Question not found")
    return question


def _call_llm(llm: LLMProvider, messages: list[dict], **kwargs) -> str:
    try:
        return llm.generate(messages, **kwargs).text
    except OpenAIError as e:
        raise HTTPException(502, "AI service unavailable, please try again") from e


def generate_diagram_svg(llm: LLMProvider, question_text: str) -> str:
    return extract_svg(llm.generate(build_diagram_messages(question_text)).text)


def attach_diagram(session_factory: sessionmaker, llm: LLMProvider, question_id: str) -> None:
    """Background task: draw a diagram for a freshly saved question."""
    db = session_factory()
    try:
        question = db.get(Question, question_id)
        if not question:
            return
        try:
            question.diagram = generate_diagram_svg(llm, question.question_text)
        except (LLMOutputError, OpenAIError) as e:
            logger.warning(f"Diagram generation failed for question {question_id}: {e}")
            return
        db.commit()
        logger.info(f"Diagram attached to question {question_id}")
    finally:
        db.close()


# ─── Endpoints ───────────────────────────────────────────────────────────────

@router.get("/topics", response_model=list[str])
def list_topics():
    return TOPICS


@router.post("/generate", response_model=GeneratedQuestionOut)
def generate_question(
    req: GenerateRequest,
    user: User = Depends(get_current_user),
    llm: LLMProvider = Depends(get_llm),
):
    """Draft a question. Nothing is saved until the user keeps it."""
    text = _call_llm(llm, build_question_messages(req.topic, req.question_type, req.difficulty))
    try:
        generated = parse_generated_question(text, req.question_type)
    except LLMOutputError as e:
        logger.error(f"Unusable generated question for {user.id}: {e} :: {text[:200]}")
        raise HTTPException(502, "AI response was not a valid question. Please try again.")

    return GeneratedQuestionOut(
        topic=req.topic,
        question_type=req.question_type,
        difficulty=req.difficulty,
        question_text=generated.questionText,
        explanation=generated.explanation,
        choices=generated.choices,
        correct_choice=generated.correctChoice,
        answer=generated.answer,
    )


@router.post("/chat", response_model=TextResponse)
def chat_about_problem(
    req: ChatRequest,
    user: User = Depends(get_current_user),
    llm: LLMProvider = Depends(get_llm),
):
    messages = build_problem_chat_messages(req.message, req.question, req.choices, req.scratchpad)
    return TextResponse(text=_call_llm(llm, messages))


@router.post("", response_model=QuestionOut, status_code=201)
def save_question(
    req: SaveQuestionRequest,
    background_tasks: BackgroundTasks,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    llm: LLMProvider = Depends(get_llm),
):
    question = Question(
        topic=req.topic,
        question_type=req.question_type,
        difficulty=req.difficulty,
        question_text=req.question_text,
        explanation=req.explanation,
        answer=req.answer,
        choices=req.choices if req.question_type == "MCQ" else None,
        correct_choice=req.correct_choice if req.question_type == "MCQ" else None,
        diagram=req.diagram,
        created_by=user.id,
    )
    db.add(question)
    db.commit()

    if req.generate_diagram and not req.diagram:
        background_tasks.add_task(attach_diagram, session_factory, llm, question.id)

    return _question_out(question)


@router.get("", response_model=list[QuestionOut])
def list_questions(
    topic: Optional[str] = None,
    question_type: Optional[str] = None,
    difficulty: Optional[str] = None,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    """The user's library, newest first. "all" (or nothing) means no filter."""
    query = db.query(Question).filter(Question.created_by == user.id)
    if topic and topic != "all":
        query = query.filter(Question.topic == topic)
    if question_type and question_type != "all":
        query = query.filter(Question.question_type == question_type)
    if difficulty and difficulty != "all":
        query = query.filter(Question.difficulty == difficulty)
    return [_question_out(q) for q in query.order_by(Question.created_at.desc()).all()]


@router.get("/{question_id}", response_model=QuestionOut)
def get_question(
    question_id: str,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    return _question_out(_owned_question(db, question_id, user))


@router.post("/{question_id}/diagram", response_model=QuestionOut)
def create_diagram(
    question_id: str,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    llm: LLMProvider = Depends(get_llm),
):
    question = _owned_question(db, question_id, user)
    try:
        question.diagram = generate_diagram_svg(llm, question.question_text)
    except LLMOutputError as e:
        logger.error(f"Could not extract SVG for question {question_id}: {e}")
        raise HTTPException(502, "Failed to generate a valid diagram. Please try again.")
    except OpenAIError as e:
        raise HTTPException(502, "AI service unavailable, please try again") from e
    db.commit()
    return _question_out(question)


@router.delete("/{question_id}/diagram", response_model=QuestionOut)
def remove_diagram(
    question_id: str,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    question = _owned_question(db, question_id, user)
    question.diagram = None
    db.commit()
    return _question_out(question)


@router.post("/{question_id}/hints", response_model=TextResponse)
def generate_hint(
    question_id: str,
    req: HintRequest,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    llm: LLMProvider = Depends(get_llm),
):
    question = _owned_question(db, question_id, user)
    messages = build_hint_messages(
        question.question_text,
        question.choices,
        req.hint_index,
        scratchpad=req.scratchpad,
        previous_hints=req.previous_hints,
    )
    return TextResponse(text=_call_llm(llm, messages, max_tokens=LLM_SHORT_MAX_TOKENS))


@router.post("/{question_id}/attempts", response_model=AttemptResponse, status_code=201)
def record_attempt(
    question_id: str,
    req: AttemptRequest,
    user: User = Depends(get_current_user),
    db: DBSession = Depends(get_db),
):
    question = _owned_question(db, question_id, user)
    mastery = memory.record_attempt(db, user.id, question, req.correct)
    return AttemptResponse(
        topic=mastery.topic,
        mastery_score=mastery.mastery_score,
        attempts=mastery.attempts,
        correct=mastery.correct,
    )
