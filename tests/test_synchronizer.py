"""Tests for the view synchronizer state machine (no Qt involved)."""

import random

import pytest

from barinventory.controller.synchronizer import ViewState, ViewSynchronizer
from barinventory.model.records import Record
from tests.fakes import FakeHost, FakeRenderer


def assert_consistent(sync, host):
    assert sync.check_consistency() == []
    assert host.order() == [r.id for r in sync.records()]
    handles = [sync.handle_for(rid) for rid in host.order()]
    assert handles == host.mounted


@pytest.fixture
def sync_a(host, renderer, scenario_a):
    return ViewSynchronizer(host, renderer, scenario_a)


class TestScenarios:
    def test_a_initial_order(self, sync_a, host):
        assert host.order() == ["b", "a", "c"]
        assert sync_a.state is ViewState.POPULATED
        assert host.container and not host.placeholder
        assert_consistent(sync_a, host)

    def test_b_add_goes_first(self, sync_a, host):
        sync_a.add_record({"id": "z", "rank": 0, "label": "Zero"})
        assert host.order() == ["z", "b", "a", "c"]
        assert host.calls[-1] == "before:z<b"
        assert_consistent(sync_a, host)

    def test_c_rank_change_moves_record(self, sync_a, host):
        old_handle = sync_a.handle_for("b")
        sync_a.update_record({"id": "b", "rank": 3, "label": "Beta"})
        # c has no rank, so it stays behind every ranked record
        assert host.order() == ["a", "b", "c"]
        assert old_handle.unmounts == 1
        assert sync_a.handle_for("b") is not old_handle
        assert_consistent(sync_a, host)

    def test_d_remove_everything(self, sync_a, host):
        for rid in ("a", "b", "c"):
            sync_a.remove_by_id(rid)
        assert sync_a.state is ViewState.EMPTY
        assert host.placeholder
        assert not host.container
        assert host.order() == []
        assert_consistent(sync_a, host)

    def test_e_update_without_change_does_not_move(self, sync_a, host, renderer):
        handle = sync_a.handle_for("c")
        created = len(renderer.created)
        calls = len(host.calls)

        sync_a.update_record({"id": "c", "rank": None, "label": "Gamma"})

        assert host.order() == ["b", "a", "c"]
        assert handle.refreshes == 1
        assert sync_a.handle_for("c") is handle
        assert len(renderer.created) == created
        assert len(host.calls) == calls


class TestTransitions:
    def test_starts_empty_with_placeholder(self, host, renderer):
        sync = ViewSynchronizer(host, renderer)
        assert sync.state is ViewState.EMPTY
        assert host.placeholder and not host.container
        assert len(sync) == 0

    def test_set_records_none_is_empty(self, sync_a, host):
        sync_a.set_records(None)
        assert sync_a.state is ViewState.EMPTY
        assert host.placeholder and not host.container

    def test_add_to_empty_rebuilds(self, host, renderer):
        sync = ViewSynchronizer(host, renderer)
        sync.add_record(Record("x", None, "X"))
        assert sync.state is ViewState.POPULATED
        assert not host.placeholder and host.container
        assert host.calls[-3:] == ["hide_placeholder", "create_container", "append:x"]
        assert_consistent(sync, host)

    def test_remove_unknown_id_is_noop(self, sync_a, host):
        before = list(host.calls)
        sync_a.remove_by_id("missing")
        assert host.calls == before
        assert_consistent(sync_a, host)

    def test_remove_unknown_on_empty_keeps_placeholder(self, host, renderer):
        sync = ViewSynchronizer(host, renderer)
        sync.remove_by_id("missing")
        assert host.placeholder and not host.container

    def test_container_survives_repopulating_rebuild(self, sync_a, host):
        sync_a.set_records([{"id": "q", "label": "Q"}])
        assert host.containers_created == 1
        assert host.order() == ["q"]


class TestLaws:
    def test_set_records_idempotent(self, host, renderer, scenario_a):
        sync = ViewSynchronizer(host, renderer, scenario_a)
        first = host.order()
        sync.set_records(scenario_a)
        assert host.order() == first
        assert_consistent(sync, host)

    def test_full_rebuild_ignores_prior_state(self, sync_a, host, scenario_a):
        sync_a.add_record({"id": "z", "rank": 0, "label": "Zero"})
        sync_a.set_records(scenario_a)
        assert host.order() == ["b", "a", "c"]

    def test_upsert_matches_add(self, scenario_a):
        record = {"id": "n", "rank": 2, "label": "Aardvark"}
        host_add, host_upd = FakeHost(), FakeHost()
        sync_add = ViewSynchronizer(host_add, FakeRenderer(), scenario_a)
        sync_upd = ViewSynchronizer(host_upd, FakeRenderer(), scenario_a)

        sync_add.add_record(record)
        sync_upd.update_record(record)

        assert host_add.order() == host_upd.order() == ["b", "n", "a", "c"]
        assert host_add.calls == host_upd.calls

    def test_rebuild_unmounts_each_handle_once(self, sync_a, host, renderer):
        old = list(host.mounted)
        sync_a.set_records([{"id": "x", "label": "X"}])
        assert [h.unmounts for h in old] == [1, 1, 1]


class TestUpdates:
    def test_label_change_moves_record(self, host, renderer):
        sync = ViewSynchronizer(host, renderer, [Record("1", None, "Apple"), Record("2", None, "Cherry")])
        sync.update_record(Record("1", None, "Damson"))
        assert host.order() == ["2", "1"]
        assert host.mounted[-1].record.label == "Damson"
        assert_consistent(sync, host)

    def test_payload_only_change_refreshes_in_place(self, sync_a, host):
        handle = sync_a.handle_for("a")
        sync_a.update_record(Record("a", 2, "Alpha", payload={"note": "new"}))
        assert handle.refreshes == 1
        assert handle.record.payload == {"note": "new"}
        assert sync_a.get("a").payload == {"note": "new"}
        assert host.order() == ["b", "a", "c"]

    def test_single_record_resort_keeps_container(self, host, renderer):
        sync = ViewSynchronizer(host, renderer, [Record("only", 1, "One")])
        sync.update_record(Record("only", 9, "One"))
        assert host.containers_created == 1
        assert "destroy_container" not in host.calls
        assert host.order() == ["only"]

    def test_rank_removed_moves_to_end(self, sync_a, host):
        sync_a.update_record({"id": "b", "label": "Beta"})
        assert host.order() == ["a", "b", "c"]
        sync_a.update_record({"id": "a", "label": "Alpha"})
        assert host.order() == ["a", "b", "c"]
        assert [r.rank for r in sync_a.records()] == [None, None, None]


class TestDuplicates:
    def test_add_existing_id_overwrites(self, sync_a, host):
        sync_a.add_record({"id": "a", "rank": 0, "label": "Alpha"})
        assert host.order() == ["a", "b", "c"]
        assert len(sync_a) == 3
        assert_consistent(sync_a, host)

    def test_set_records_keeps_last_duplicate(self, host, renderer):
        sync = ViewSynchronizer(host, renderer, [
            {"id": "d", "rank": 1, "label": "first"},
            {"id": "e", "rank": 2, "label": "E"},
            {"id": "d", "rank": 3, "label": "last"},
        ])
        assert host.order() == ["e", "d"]
        assert sync.get("d").label == "last"
        assert_consistent(sync, host)

    def test_numeric_ids_match_their_string_form(self, host, renderer):
        sync = ViewSynchronizer(host, renderer)
        sync.add_record({"id": 1, "rank": 1, "label": "One"})
        assert 1 in sync
        assert sync.get(1).id == "1"
        assert sync.handle_for(1) is not None

        sync.remove_by_id(1)
        assert len(sync) == 0
        assert sync.state is ViewState.EMPTY
        assert host.placeholder and not host.container


class TestFailures:
    def test_renderer_error_propagates(self, sync_a, renderer):
        renderer.fail_for.add("boom")
        with pytest.raises(ValueError):
            sync_a.add_record({"id": "boom", "rank": 5, "label": "Boom"})
        # collection already holds the record; nothing was mounted for it
        assert "boom" in sync_a
        assert sync_a.handle_for("boom") is None

    def test_host_error_propagates(self, sync_a, host):
        host.fail_on_mount = True
        with pytest.raises(RuntimeError):
            sync_a.add_record({"id": "y", "rank": 9, "label": "Y"})

    def test_update_after_failure_rebuilds(self, sync_a, host, renderer):
        renderer.fail_for.add("boom")
        with pytest.raises(ValueError):
            sync_a.add_record({"id": "boom", "rank": 5, "label": "Boom"})
        renderer.fail_for.clear()

        sync_a.update_record({"id": "boom", "rank": 5, "label": "Boom"})
        assert host.order() == ["b", "a", "boom", "c"]
        assert_consistent(sync_a, host)

    def test_refresh_error_leaves_collection_sorted(self, host, renderer):
        sync = ViewSynchronizer(host, renderer, [Record("a", 1, "A"), Record("b", 2, "B"), Record("c", 3, "C")])
        sync.handle_for("a").fail_refresh = True

        with pytest.raises(RuntimeError):
            sync.update_record(Record("a", 9, "A"))
        assert [r.id for r in sync.records()] == ["b", "c", "a"]

        sync.add_record(Record("d", 4, "D"))
        assert [r.id for r in sync.records()] == ["b", "c", "d", "a"]
        assert "collection is not sorted" not in sync.check_consistency()

    def test_set_records_recovers(self, sync_a, host, scenario_a):
        host.fail_on_mount = True
        with pytest.raises(RuntimeError):
            sync_a.add_record({"id": "y", "rank": 9, "label": "Y"})
        host.fail_on_mount = False

        sync_a.set_records(scenario_a)
        assert_consistent(sync_a, host)


def test_random_mutations_keep_invariants(host, renderer):
    rng = random.Random(1234)
    sync = ViewSynchronizer(host, renderer)
    labels = ["ale", "Bock", "cider", "Dunkel", "éclair", "Fizz"]

    for _ in range(400):
        op = rng.choice(["add"] * 3 + ["update"] * 3 + ["remove"] * 2 + ["set"])
        rid = f"r{rng.randint(0, 12)}"
        rank = rng.choice([None, 0, 1, 2, 2.5, 5])
        record = Record(rid, rank, rng.choice(labels))

        if op == "add":
            sync.add_record(record)
        elif op == "update":
            sync.update_record(record)
        elif op == "remove":
            sync.remove_by_id(rid)
        else:
            sync.set_records([Record(f"r{i}", rng.choice([None, 1, 3]), rng.choice(labels)) for i in range(5)])

        assert_consistent(sync, host)
        assert host.placeholder == (len(sync) == 0)
        assert host.container == (len(sync) > 0)
