"""
Tree Browser: builds the view model the resource page renders.

Browse mode walks the forest from its roots with an explicit stack. A
visited set and a depth bound keep malformed parent chains from looping.
Search mode skips the walk and returns the flat search result list.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from sqlalchemy.orm import Session as DBSession

from physics_tutor.config import CATALOG_MAX_DEPTH, SIMULATION_GRID_THRESHOLD
from physics_tutor.models import ResourceNode
from physics_tutor.catalog.queries import list_children, search_resources

logger = logging.getLogger(__name__)


@dataclass
class Visit:
    node: ResourceNode
    depth: int
    layout: Optional[str] = None  # "grid" | "list", categories only


def choose_layout(children: list[ResourceNode]) -> str:
    """Grid when simulations make up most of a category, list otherwise."""
    if not children:
        return "list"
    simulations = sum(1 for c in children if c.type == "simulation")
    return "grid" if simulations / len(children) > SIMULATION_GRID_THRESHOLD else "list"


def walk(db: DBSession, max_depth: int = CATALOG_MAX_DEPTH) -> Iterator[Visit]:
    """Depth-first, sibling order preserved. Leaves are never expanded."""
    visited: set[str] = set()
    stack = [(root, 0) for root in reversed(list_children(db, None))]

    while stack:
        node, depth = stack.pop()
        if node.id in visited:
            logger.warning(f"Catalog cycle: '{node.name}' ({node.id}) reached twice, skipping")
            continue
        if depth > max_depth:
            logger.warning(f"Catalog depth {depth} exceeds {max_depth} at '{node.name}', skipping")
            continue
        visited.add(node.id)

        layout = None
        if node.type == "category":
            children = list_children(db, node.id)
            layout = choose_layout(children)
            stack.extend((child, depth + 1) for child in reversed(children))

        yield Visit(node=node, depth=depth, layout=layout)


def build_tree(db: DBSession, max_depth: int = CATALOG_MAX_DEPTH) -> list[dict]:
    """Nested dicts: categories carry `layout` and `children`."""
    roots: list[dict] = []
    entries: dict[str, dict] = {}

    for visit in walk(db, max_depth):
        entry = visit.node.to_dict()
        entry["depth"] = visit.depth
        if visit.layout is not None:
            entry["layout"] = visit.layout
            entry["children"] = []

        parent = entries.get(visit.node.parent_id) if visit.node.parent_id else None
        if parent is not None:
            parent["children"].append(entry)
        else:
            roots.append(entry)
        entries[visit.node.id] = entry

    return roots


def browse(db: DBSession, search: str = "", max_depth: int = CATALOG_MAX_DEPTH) -> dict:
    if search and search.strip():
        results = search_resources(db, search)
        return {"mode": "search", "results": [n.to_dict() for n in results]}
    return {"mode": "tree", "roots": build_tree(db, max_depth)}
