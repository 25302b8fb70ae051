"""
Resource Store: data access for catalog nodes.

The store never commits; callers own the transaction. Inserts are checked
against the node-shape rules before they reach the table, so a category
never carries a url and a parent always exists before its children.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from physics_tutor.models import ResourceNode, RESOURCE_TYPES, LEAF_TYPES

logger = logging.getLogger(__name__)


class InvalidResourceNode(ValueError):
    """Raised when a node breaks the catalog shape rules."""


@dataclass
class NewResource:
    name: str
    type: str
    parent_id: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None
    order: int = 0
    source: Optional[str] = None


class ResourceStore:
    def __init__(self, db: DBSession):
        self.db = db

    # ─── Read ────────────────────────────────────────────────────────────────

    def get(self, node_id: str) -> Optional[ResourceNode]:
        """Point lookup. Returns None when the id is unknown."""
        return self.db.get(ResourceNode, node_id)

    def count(self, source: Optional[str] = None) -> int:
        query = self.db.query(ResourceNode)
        if source is not None:
            query = query.filter(ResourceNode.source == source)
        return query.count()

    # ─── Write ───────────────────────────────────────────────────────────────

    def validate(self, node: NewResource) -> None:
        if not node.name or not node.name.strip():
            raise InvalidResourceNode("Resource name is required")
        if node.type not in RESOURCE_TYPES:
            raise InvalidResourceNode(f"Unknown resource type '{node.type}'")
        if node.type == "category" and node.url:
            raise InvalidResourceNode(f"Category '{node.name}' cannot have a url")
        if node.type in LEAF_TYPES and not node.url:
            raise InvalidResourceNode(f"{node.type} '{node.name}' needs a url")
        if node.image_url and node.type != "simulation":
            raise InvalidResourceNode(f"Only simulations carry an image_url ('{node.name}')")
        if node.parent_id is not None and self.get(node.parent_id) is None:
            raise InvalidResourceNode(f"Parent {node.parent_id} does not exist")

    def insert(self, node: NewResource) -> str:
        """Validate and add a node. Returns the assigned id."""
        self.validate(node)
        row = ResourceNode(
            parent_id=node.parent_id,
            name=node.name.strip(),
            type=node.type,
            url=node.url,
            image_url=node.image_url,
            order=node.order,
            source=node.source,
        )
        self.db.add(row)
        self.db.flush()  # assigns the id and makes the row visible to later parent checks
        return row.id

    def delete_all(self, source: Optional[str] = None) -> int:
        """Bulk-delete nodes from one source (or every node when source is None).

        Runs as a single statement so parents and children go together.
        Returns the number of rows matching the source filter, counted up
        front because the statement rowcount misses cascaded rows. Descendants
        from another source that hang under a deleted node are removed by the
        parent cascade but are not part of this count.
        """
        query = self.db.query(ResourceNode)
        if source is not None:
            query = query.filter(ResourceNode.source == source)
        deleted = query.count()
        query.delete(synchronize_session=False)
        self.db.expire_all()
        logger.info(f"Deleted {deleted} resources (source={source or '*'})")
        return deleted
