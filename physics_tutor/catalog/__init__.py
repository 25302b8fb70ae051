"""
Resource catalog: store, queries, seeding and the tree browser.
"""
from physics_tutor.catalog.store import ResourceStore, NewResource, InvalidResourceNode
from physics_tutor.catalog.queries import get_resource, list_children, search_resources
from physics_tutor.catalog.browser import browse, build_tree, walk
from physics_tutor.catalog.seeding import seed_all, run_seed, reset_catalog, SEED_PROCEDURES

__all__ = [
    "ResourceStore", "NewResource", "InvalidResourceNode",
    "get_resource", "list_children", "search_resources",
    "browse", "build_tree", "walk",
    "seed_all", "run_seed", "reset_catalog", "SEED_PROCEDURES",
]
