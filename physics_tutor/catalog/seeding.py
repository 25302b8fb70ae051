"""
Catalog seeding, run as versioned migrations.

Each source owns a fixed dataset and a version number. A run takes the
seed lock, reads the source's seed_runs marker (row-locked where the
database supports it) and skips when that version is already applied.
Otherwise it deletes every row tagged with the source and reinserts the
dataset in one transaction. Repeated runs converge to one copy.
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DBSession

from physics_tutor.models import SeedRun
from physics_tutor.catalog.store import ResourceStore, NewResource
from physics_tutor.catalog import seed_data

logger = logging.getLogger(__name__)

_seed_lock = threading.Lock()


@dataclass
class SeedNode:
    """One node of a seed dataset; children nest under categories."""
    name: str
    type: str = "category"
    url: Optional[str] = None
    image_url: Optional[str] = None
    children: list["SeedNode"] = field(default_factory=list)


@dataclass(frozen=True)
class SeedProcedure:
    source: str
    version: int
    build: Callable[[], list[SeedNode]]


@dataclass
class SeedResult:
    source: str
    version: int
    deleted: int = 0
    inserted: int = 0
    skipped: bool = False


# ─── Khan Academy ────────────────────────────────────────────────────────────

_UNIT_SEGMENT = re.compile(r"x[a-f0-9]+:")


@dataclass
class KhanLink:
    name: str
    kind: str  # exercise | quiz | test
    course: str
    topic: str
    url: str


def _title_case(text: str) -> str:
    return re.sub(r"(^\w)|(\s+\w)", lambda m: m.group(0).upper(), text)


def parse_khan_path(path: str) -> KhanLink:
    """Turn a Khan Academy URL path into a named, classified link."""
    parts = path.split("/")

    kind = "exercise"
    if "quiz" in parts:
        kind = "quiz"
    elif "test" in parts:
        kind = "test"

    last = parts[-1]
    name = last if "e" in parts else last.split(":")[-1]
    name = name.replace("-", " ").replace("ap1", "AP1").replace("2d", "2D")
    name = name[:1].upper() + name[1:]

    course = "AP Physics"
    if "ap-college-physics-1" in path:
        course = "AP Physics 1"
    elif "ap-physics-2" in path:
        course = "AP Physics 2"

    topic = course
    for part in parts:
        if _UNIT_SEGMENT.search(part):
            topic = _title_case(part.split(":")[1].replace("-", " "))
            break

    return KhanLink(
        name=name,
        kind=kind,
        course=course,
        topic=topic,
        url=f"{seed_data.KHAN_ACADEMY_BASE_URL}{path}",
    )


def build_khan_academy() -> list[SeedNode]:
    """Khan Academy > course > unit > link, in the order the paths are listed."""
    courses: dict[str, SeedNode] = {}
    units: dict[tuple[str, str], SeedNode] = {}

    for path in seed_data.AP_PHYSICS_1_PATHS + seed_data.AP_PHYSICS_2_PATHS:
        link = parse_khan_path(path)
        course = courses.get(link.course)
        if course is None:
            course = courses[link.course] = SeedNode(name=link.course)
        unit = units.get((link.course, link.topic))
        if unit is None:
            unit = units[(link.course, link.topic)] = SeedNode(name=link.topic)
            course.children.append(unit)
        unit.children.append(SeedNode(name=link.name, type="link", url=link.url))

    return [SeedNode(name="Khan Academy", children=list(courses.values()))]


# ─── Study Guides ────────────────────────────────────────────────────────────

def build_study_guides() -> list[SeedNode]:
    roots = []
    for course in seed_data.STUDY_GUIDE_COURSES:
        units = [
            SeedNode(name=unit_name, children=[
                SeedNode(
                    name=f"{unit_name} Guide Sheet",
                    type="guidesheet",
                    url=f"{seed_data.OPENSTAX_BASE_URL}/{page}",
                ),
            ])
            for unit_name, page in course["units"]
        ]
        video_name, video_url = course["video"]
        link_name, link_url = course["link"]
        roots.append(SeedNode(name=course["name"], children=[
            *units,
            SeedNode(name="Lecture Videos", children=[
                SeedNode(name=video_name, type="video", url=video_url),
            ]),
            SeedNode(name=link_name, type="link", url=link_url),
        ]))
    return roots


# ─── PhET ────────────────────────────────────────────────────────────────────

def build_phet_simulations() -> list[SeedNode]:
    groups = [
        SeedNode(name=group_name, children=[
            SeedNode(
                name=sim_name,
                type="simulation",
                url=seed_data.phet_simulation_url(slug),
                image_url=seed_data.phet_thumbnail_url(slug),
            )
            for sim_name, slug in sims
        ])
        for group_name, sims in seed_data.PHET_GROUPS
    ]
    return [SeedNode(name="PhET Simulations", children=groups)]


SEED_PROCEDURES = [
    SeedProcedure(source="Khan Academy", version=1, build=build_khan_academy),
    SeedProcedure(source="Study Guides", version=1, build=build_study_guides),
    SeedProcedure(source="PhET", version=1, build=build_phet_simulations),
]


def get_procedure(source: str) -> Optional[SeedProcedure]:
    return next((p for p in SEED_PROCEDURES if p.source == source), None)


# ─── Runner ──────────────────────────────────────────────────────────────────

def _insert_nodes(
    store: ResourceStore,
    nodes: list[SeedNode],
    parent_id: Optional[str],
    source: str,
) -> int:
    inserted = 0
    for position, node in enumerate(nodes, start=1):
        node_id = store.insert(NewResource(
            name=node.name,
            type=node.type,
            parent_id=parent_id,
            url=node.url,
            image_url=node.image_url,
            order=position,
            source=source,
        ))
        inserted += 1 + _insert_nodes(store, node.children, node_id, source)
    return inserted


def _select_marker(db: DBSession, source: str) -> Optional[SeedRun]:
    return (
        db.query(SeedRun)
        .filter(SeedRun.source == source)
        .with_for_update()
        .first()
    )


def _lock_marker(db: DBSession, source: str) -> SeedRun:
    """Row-lock the source's marker, creating it on the first run.

    Two processes can both miss the marker and race to insert it. The loser
    gets an IntegrityError on the primary key, rolls back and waits on the
    winner's row lock instead.
    """
    marker = _select_marker(db, source)
    if marker is not None:
        return marker

    marker = SeedRun(source=source, version=0, node_count=0)
    db.add(marker)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        logger.info(f"Seed marker for '{source}' created concurrently, re-reading")
        marker = _select_marker(db, source)
        if marker is None:
            raise
    return marker


def run_seed(db: DBSession, procedure: SeedProcedure, force: bool = False) -> SeedResult:
    """Apply one seed source. Skips when its version is already recorded, unless forced."""
    with _seed_lock:
        try:
            marker = _lock_marker(db, procedure.source)

            if marker.version == procedure.version and not force:
                db.commit()
                logger.info(f"Seed '{procedure.source}' v{procedure.version} already applied")
                return SeedResult(procedure.source, procedure.version, skipped=True)

            store = ResourceStore(db)
            deleted = store.delete_all(source=procedure.source)
            inserted = _insert_nodes(store, procedure.build(), None, procedure.source)

            marker.version = procedure.version
            marker.node_count = inserted
            marker.applied_at = datetime.now(timezone.utc)
            db.commit()
        except Exception:
            db.rollback()
            logger.error(f"Seed '{procedure.source}' failed, rolled back")
            raise

    logger.info(
        f"Seed '{procedure.source}' v{procedure.version}: "
        f"deleted {deleted}, inserted {inserted}"
    )
    return SeedResult(procedure.source, procedure.version, deleted=deleted, inserted=inserted)


def seed_all(db: DBSession, force: bool = False) -> list[SeedResult]:
    return [run_seed(db, procedure, force=force) for procedure in SEED_PROCEDURES]


def reset_catalog(db: DBSession) -> tuple[int, list[SeedResult]]:
    """Delete every node, including hand-added ones, then force every seed."""
    with _seed_lock:
        deleted = ResourceStore(db).delete_all()
        db.query(SeedRun).delete(synchronize_session=False)
        db.commit()
    return deleted, seed_all(db, force=True)
