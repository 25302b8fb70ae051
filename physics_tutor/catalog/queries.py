"""
Catalog Query Service: read operations over the resource table.
Each call is a fresh snapshot; there is no cursor or pagination.
"""

import re
from typing import Optional

from sqlalchemy import or_, func
from sqlalchemy.orm import Session as DBSession

from physics_tutor.config import CATALOG_SEARCH_LIMIT
from physics_tutor.models import ResourceNode

_TOKEN = re.compile(r"[a-z0-9']+")


def get_resource(db: DBSession, node_id: str) -> Optional[ResourceNode]:
    return db.get(ResourceNode, node_id)


def list_children(db: DBSession, parent_id: Optional[str] = None) -> list[ResourceNode]:
    """Nodes whose parent_id equals the argument (roots when None), ascending by order."""
    query = db.query(ResourceNode)
    if parent_id is None:
        query = query.filter(ResourceNode.parent_id.is_(None))
    else:
        query = query.filter(ResourceNode.parent_id == parent_id)
    return query.order_by(ResourceNode.order.asc(), ResourceNode.created_at.asc()).all()


# ─── Relevance Search ────────────────────────────────────────────────────────

# Filler words that carry no topic. Dropped from search terms.
STOPWORDS = frozenset({
    "a", "about", "an", "and", "are", "as", "at", "be", "by", "do", "does",
    "for", "from", "how", "in", "into", "is", "it", "its", "of", "on", "or",
    "the", "to", "use", "using", "vs", "what", "when", "why", "with",
})

# Tokens this short only match the start of a word ("rc" hits "RC Circuits", not "Force")
SHORT_TOKEN_LENGTH = 3


def tokenize(text: str) -> list[str]:
    """Lowercased word tokens without stopwords. Single characters are dropped unless nothing else is left."""
    tokens = [t for t in _TOKEN.findall(text.lower()) if t not in STOPWORDS]
    return [t for t in tokens if len(t) > 1] or tokens


def _is_short(token: str) -> bool:
    return len(token) <= SHORT_TOKEN_LENGTH


def _token_matches(token: str, name_lower: str, words: list[str]) -> bool:
    if _is_short(token):
        return any(w.startswith(token) for w in words)
    return token in name_lower


def relevance(name: str, term: str) -> float:
    """
    Score how well a node name matches a search term. 0 means no match.

    Long tokens match anywhere in the name, short ones only at a word start.
    When the term has any long token, at least one of them must match.
    On top of the matched fraction: +1 when every token matched, up to +0.25
    for tokens that start a word, +2 for an exact name match.
    """
    tokens = tokenize(term)
    if not tokens:
        return 0.0

    name_lower = name.lower()
    words = _TOKEN.findall(name_lower)
    matched = [t for t in tokens if _token_matches(t, name_lower, words)]
    if not matched:
        return 0.0
    if any(not _is_short(t) for t in tokens) and all(_is_short(t) for t in matched):
        return 0.0

    score = len(matched) / len(tokens)
    if len(matched) == len(tokens):
        score += 1.0
    prefix_hits = sum(1 for t in matched if any(w.startswith(t) for w in words))
    score += 0.25 * prefix_hits / len(tokens)
    if " ".join(words) == " ".join(_TOKEN.findall(term.lower())):
        score += 2.0
    return score


def search_resources(
    db: DBSession,
    term: str,
    limit: int = CATALOG_SEARCH_LIMIT,
) -> list[ResourceNode]:
    """
    Best-effort relevance search over node names only.

    Callers must not pass an empty term; browsing falls back to the root
    listing instead. A term made only of stopwords finds nothing.
    """
    if not term or not term.strip():
        raise ValueError("search term must not be empty")

    tokens = tokenize(term)
    if not tokens:
        return []

    # Nodes hit only by short tokens score zero when a long token exists
    required = [t for t in tokens if not _is_short(t)] or tokens
    lowered = func.lower(ResourceNode.name)
    candidates = (
        db.query(ResourceNode)
        .filter(or_(*[lowered.contains(t, autoescape=True) for t in required]))
        .all()
    )

    scored = [(relevance(node.name, term), node) for node in candidates]
    scored = [(s, node) for s, node in scored if s > 0]
    scored.sort(key=lambda pair: (-pair[0], pair[1].name.lower(), pair[1].order))
    return [node for _, node in scored[:limit]]
