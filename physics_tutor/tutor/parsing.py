"""
Parsing for LLM output. Everything the model returns is untrusted text:
it is checked here before anything structured is built from it.
"""

import json
import logging
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")
_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")
_SVG = re.compile(r"<svg\b[\s\S]*?</svg>", re.IGNORECASE)
_CHOICE_LABEL = re.compile(r"^\(?([A-Ha-h])(?:[).:]\s*|$)")


class LLMOutputError(ValueError):
    """The model returned something we cannot use."""


def strip_fences(text: str) -> str:
    """Remove a surrounding ```json / ``` markdown fence if present."""
    text = text.strip()
    if text.startswith("```"):
        first_newline = text.find("\n")
        if first_newline != -1:
            text = text[first_newline + 1:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def _load(text: str, pattern: re.Pattern, kind: type):
    text = strip_fences(text)
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        match = pattern.search(text)
        if not match:
            raise LLMOutputError(f"No JSON {kind.__name__} found in model output")
        try:
            value = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise LLMOutputError(f"Model output is not valid JSON: {e}") from e
    if not isinstance(value, kind):
        raise LLMOutputError(f"Expected a JSON {kind.__name__}, got {type(value).__name__}")
    return value


def extract_json_object(text: str) -> dict:
    return _load(text, _JSON_OBJECT, dict)


def extract_json_array(text: str) -> list:
    return _load(text, _JSON_ARRAY, list)


# ─── Generated Questions ─────────────────────────────────────────────────────

class GeneratedQuestion(BaseModel):
    model_config = ConfigDict(extra="ignore")

    questionText: str
    explanation: str
    choices: Optional[list[str]] = None
    correctChoice: Optional[str] = None
    answer: Optional[str] = None


def match_choice(correct: str, choices: list[str]) -> Optional[str]:
    """
    Find the choice the model marked as correct.
    Accepts the choice text itself or its letter label ("B", "B)", "(B)").
    """
    target = correct.strip()
    for choice in choices:
        if choice.strip().casefold() == target.casefold():
            return choice

    label = _CHOICE_LABEL.match(target)
    if not label:
        return None
    letter = label.group(1).upper()

    labelled = [(c, _CHOICE_LABEL.match(c.strip())) for c in choices]
    if any(m for _, m in labelled):
        for choice, m in labelled:
            if m and m.group(1).upper() == letter:
                return choice
        return None

    # Unlabelled choices: A is the first, B the second, ...
    index = ord(letter) - ord("A")
    if 0 <= index < len(choices):
        return choices[index]
    return None


def parse_generated_question(text: str, question_type: str) -> GeneratedQuestion:
    data = extract_json_object(text)
    try:
        question = GeneratedQuestion.model_validate(data)
    except ValidationError as e:
        logger.error(f"Generated question failed validation: {e}")
        raise LLMOutputError("Generated question is missing required fields") from e

    if not question.questionText.strip() or not question.explanation.strip():
        raise LLMOutputError("Generated question has empty text or explanation")

    if question_type == "MCQ":
        choices = [c for c in (question.choices or []) if c.strip()]
        if len(choices) < 2:
            raise LLMOutputError("Multiple choice question needs at least two choices")
        if not question.correctChoice:
            raise LLMOutputError("Multiple choice question has no correct choice")
        matched = match_choice(question.correctChoice, choices)
        if matched is None:
            raise LLMOutputError(
                f"Correct choice '{question.correctChoice}' is not one of the choices"
            )
        question.choices = choices
        question.correctChoice = matched
    else:
        question.choices = None
        question.correctChoice = None

    return question


# ─── Diagrams ────────────────────────────────────────────────────────────────

def extract_svg(text: str) -> str:
    """Pull the first <svg>...</svg> element out of model output, on one line."""
    match = _SVG.search(strip_fences(text or ""))
    if not match:
        raise LLMOutputError("Model output contains no SVG element")
    return match.group(0).replace("\n", "").strip()


# ─── Search Queries ──────────────────────────────────────────────────────────

def parse_search_queries(text: str, limit: int) -> list[str]:
    """Best effort: unusable output means no suggestions, never an error."""
    try:
        values = extract_json_array(text)
    except LLMOutputError as e:
        logger.warning(f"Search query extraction skipped: {e}")
        return []

    queries = []
    for value in values:
        if isinstance(value, str) and value.strip() and value.strip() not in queries:
            queries.append(value.strip())
    return queries[:limit]
