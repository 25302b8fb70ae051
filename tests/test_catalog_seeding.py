"""
Tests for catalog seeding: Khan Academy path parsing, dataset builders,
versioned idempotent runs and full reset.
"""

import pytest

from physics_tutor.catalog import seed_data, seeding
from physics_tutor.catalog.queries import list_children
from physics_tutor.catalog.seeding import (
    SeedNode, SeedProcedure, SEED_PROCEDURES, get_procedure, parse_khan_path,
    build_khan_academy, build_study_guides, build_phet_simulations,
    run_seed, seed_all, reset_catalog,
)
from physics_tutor.catalog.store import ResourceStore, NewResource, InvalidResourceNode
from physics_tutor.models import ResourceNode, SeedRun


def _count_tree(nodes):
    return sum(1 + _count_tree(n.children) for n in nodes)


# ─── Khan Academy Paths ──────────────────────────────────────────────────────

class TestParseKhanPath:
    def test_exercise(self):
        link = parse_khan_path(
            "/science/ap-college-physics-1/xf557a762645cccc5:kinematics/"
            "xf557a762645cccc5:scalars-and-vectors-in-1d/e/scalars-and-vectors"
        )
        assert link.name == "Scalars and vectors"
        assert link.kind == "exercise"
        assert link.course == "AP Physics 1"
        assert link.topic == "Kinematics"
        assert link.url.startswith("https://www.khanacademy.org/science/ap-college-physics-1/")

    def test_quiz(self):
        link = parse_khan_path(
            "/science/ap-college-physics-1/xf557a762645cccc5:kinematics/"
            "xf557a762645cccc5:visual-models-of-motion/quiz/xf557a762645cccc5:kinematics-quiz-1"
        )
        assert link.kind == "quiz"
        assert link.name == "Kinematics quiz 1"

    def test_unit_test(self):
        link = parse_khan_path(
            "/science/ap-college-physics-1/xf557a762645cccc5:kinematics/"
            "xf557a762645cccc5:motion-in-2d/test/xf557a762645cccc5:kinematics-unit-test"
        )
        assert link.kind == "test"
        assert link.name == "Kinematics unit test"

    def test_ap1_and_2d_are_uppercased(self):
        link = parse_khan_path(
            "/science/ap-college-physics-1/xf557a762645cccc5:kinematics/"
            "xf557a762645cccc5:motion-in-2d/e/analyzing-vectors-in-2d-ap1"
        )
        assert link.name == "Analyzing vectors in 2D AP1"

    def test_ap_physics_2(self):
        link = parse_khan_path(
            "/science/ap-physics-2/x0e2f5a2c:thermodynamics/x0e2f5a2c:gases/e/kinetic-molecular-theory"
        )
        assert link.course == "AP Physics 2"
        assert link.topic == "Thermodynamics"
        assert link.name == "Kinetic molecular theory"

    def test_unknown_course_falls_back(self):
        link = parse_khan_path("/science/physics/e/some-exercise")
        assert link.course == "AP Physics"
        assert link.topic == "AP Physics"


# ─── Builders ────────────────────────────────────────────────────────────────

class TestBuilders:
    def test_khan_academy_has_one_link_per_path(self):
        roots = build_khan_academy()
        assert [r.name for r in roots] == ["Khan Academy"]
        courses = roots[0].children
        assert [c.name for c in courses] == ["AP Physics 1", "AP Physics 2"]
        links = [leaf for c in courses for unit in c.children for leaf in unit.children]
        assert len(links) == len(seed_data.AP_PHYSICS_1_PATHS) + len(seed_data.AP_PHYSICS_2_PATHS)
        assert all(leaf.type == "link" and leaf.url for leaf in links)

    def test_study_guides_per_course(self):
        roots = build_study_guides()
        assert len(roots) == len(seed_data.STUDY_GUIDE_COURSES)
        mechanics = roots[0]
        kinds = {child.type for unit in mechanics.children for child in unit.children}
        assert {"guidesheet", "video"} <= kinds
        assert mechanics.children[-1].type == "link"

    def test_phet_simulations_have_thumbnails(self):
        roots = build_phet_simulations()
        sims = [s for group in roots[0].children for s in group.children]
        assert sims
        for sim in sims:
            assert sim.type == "simulation"
            assert sim.url.startswith(seed_data.PHET_BASE_URL)
            assert sim.image_url.endswith("-600.png")

    def test_get_procedure(self):
        assert get_procedure("PhET").build is build_phet_simulations
        assert get_procedure("Unknown") is None


# ─── Runs ────────────────────────────────────────────────────────────────────

class TestRunSeed:
    def test_first_run_inserts_whole_dataset(self, db):
        procedure = get_procedure("Khan Academy")
        result = run_seed(db, procedure)
        assert not result.skipped
        assert result.deleted == 0
        assert result.inserted == _count_tree(build_khan_academy())
        assert ResourceStore(db).count("Khan Academy") == result.inserted

    def test_second_run_is_skipped(self, db):
        procedure = get_procedure("Khan Academy")
        first = run_seed(db, procedure)
        second = run_seed(db, procedure)
        assert second.skipped
        assert ResourceStore(db).count("Khan Academy") == first.inserted

    def test_forced_reseed_keeps_one_copy(self, db):
        procedure = get_procedure("Khan Academy")
        first = run_seed(db, procedure)
        second = run_seed(db, procedure, force=True)
        assert second.deleted == first.inserted
        assert ResourceStore(db).count("Khan Academy") == first.inserted
        assert len(list_children(db, None)) == 1

    def test_new_version_replaces_rows(self, db):
        run_seed(db, SeedProcedure("PhET", 1, lambda: [SeedNode(name="Old Sims")]))
        result = run_seed(db, SeedProcedure("PhET", 2, lambda: [SeedNode(name="New Sims")]))
        assert result.deleted == 1
        assert [n.name for n in list_children(db, None)] == ["New Sims"]
        assert db.get(SeedRun, "PhET").version == 2

    def test_other_sources_untouched(self, db):
        store = ResourceStore(db)
        store.insert(NewResource(name="My Notes", type="category"))
        db.commit()
        run_seed(db, get_procedure("PhET"))
        run_seed(db, get_procedure("PhET"), force=True)
        assert "My Notes" in [n.name for n in list_children(db, None)]

    def test_sibling_order_follows_dataset(self, db):
        run_seed(db, get_procedure("PhET"))
        root = list_children(db, None)[0]
        groups = list_children(db, root.id)
        assert [g.name for g in groups] == [name for name, _ in seed_data.PHET_GROUPS]
        assert [g.order for g in groups] == [1, 2]

    def test_marker_created_by_another_worker(self, db, session_factory, monkeypatch):
        other = session_factory()
        try:
            winner = run_seed(other, get_procedure("PhET"))
        finally:
            other.close()

        # This worker read no marker before the other one committed its insert
        real_select = seeding._select_marker
        calls = []

        def stale_then_real(session, source):
            calls.append(source)
            return None if len(calls) == 1 else real_select(session, source)

        monkeypatch.setattr(seeding, "_select_marker", stale_then_real)

        result = run_seed(db, get_procedure("PhET"))

        assert result.skipped
        assert len(calls) == 2
        assert ResourceStore(db).count("PhET") == winner.inserted
        assert db.query(SeedRun).count() == 1

    def test_failed_seed_rolls_back(self, db):
        run_seed(db, get_procedure("PhET"))
        before = ResourceStore(db).count("PhET")

        broken = SeedProcedure("PhET", 2, lambda: [SeedNode(name="Bad", url="https://x")])
        with pytest.raises(InvalidResourceNode):
            run_seed(db, broken)

        assert ResourceStore(db).count("PhET") == before
        assert db.get(SeedRun, "PhET").version == 1


class TestSeedAllAndReset:
    def test_seed_all_runs_every_source(self, db):
        results = seed_all(db)
        assert [r.source for r in results] == [p.source for p in SEED_PROCEDURES]
        assert all(not r.skipped for r in results)
        assert all(r.skipped for r in seed_all(db))

    def test_reset_removes_hand_added_nodes(self, db):
        seed_all(db)
        ResourceStore(db).insert(NewResource(name="My Notes", type="category"))
        db.commit()
        total = db.query(ResourceNode).count()

        deleted, results = reset_catalog(db)

        assert deleted == total
        assert all(not r.skipped for r in results)
        assert "My Notes" not in [n.name for n in list_children(db, None)]
        assert db.query(ResourceNode).count() == total - 1
