"""
Tests for trace models and the JSONL loader.
"""

import pytest

from navscenes.core.errors import InvalidStateError, TraceError
from navscenes.trace import RouteInterner, TraceRoute, TraceStep, iter_trace, load_state, load_trace

from navscenes.tests.helpers import write_jsonl


def test_load_trace(trace_file):
    steps = load_trace(trace_file)

    assert len(steps) == 4
    assert steps[1].index == 1
    assert [c.key for c in steps[1].children] == ["home", "detail"]
    assert steps[1].children[1].params == {"id": 7}
    assert steps[3].retire == ["scene_detail"]


def test_blank_lines_skipped(tmp_path):
    path = tmp_path / "gaps.jsonl"
    path.write_text('\n{"index": 0, "children": [{"key": "a"}]}\n\n', encoding="utf-8")
    assert len(list(iter_trace(str(path)))) == 1


def test_invalid_json_names_line(tmp_path):
    path = tmp_path / "broken.jsonl"
    path.write_text('{"index": 0, "children": []}\n{not json\n', encoding="utf-8")
    with pytest.raises(TraceError, match=r":2: invalid JSON"):
        load_trace(str(path))


def test_unknown_step_field_rejected(tmp_path):
    path = write_jsonl(tmp_path / "extra.jsonl", [{"index": 0, "children": [], "focus": 1}])
    with pytest.raises(TraceError, match=r":1: invalid trace step"):
        load_trace(path)


def test_route_without_key_rejected(tmp_path):
    path = write_jsonl(tmp_path / "nokey.jsonl", [{"index": 0, "children": [{"title": "x"}]}])
    with pytest.raises(TraceError):
        load_trace(path)


def test_missing_file_raises():
    with pytest.raises(FileNotFoundError):
        load_trace("/nonexistent/trace.jsonl")


def test_load_state(tmp_path):
    path = tmp_path / "state.json"
    path.write_text('{"index": 1, "children": [{"key": "a"}, {"key": "b"}]}', encoding="utf-8")
    state = load_state(str(path)).to_parent_state()
    assert state.index == 1
    assert [c.key for c in state.children] == ["a", "b"]


def test_load_state_empty_file(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("  \n", encoding="utf-8")
    with pytest.raises(TraceError, match="empty state file"):
        load_state(str(path))


def test_interner_shares_equal_routes():
    interner = RouteInterner()
    one = interner.route(TraceRoute(key="a", id=1))
    two = interner.route(TraceRoute(key="a", id=1))
    other = interner.route(TraceRoute(key="a", id=2))

    assert one is two
    assert other is not one
    assert len(interner) == 2


def test_steps_share_routes_through_interner():
    interner = RouteInterner()
    first = TraceStep(index=0, children=[TraceRoute(key="a")]).to_parent_state(interner)
    assert len(interner) == 1
    second = TraceStep(index=0, children=[TraceRoute(key="a")]).to_parent_state(interner)
    assert first.children[0] is second.children[0]


def test_out_of_range_index_surfaces_on_conversion():
    step = TraceStep(index=3, children=[TraceRoute(key="a")])
    with pytest.raises(InvalidStateError):
        step.to_parent_state()


def test_default_interner_is_private_per_call():
    step = TraceStep(index=0, children=[TraceRoute(key="a")])
    assert step.to_parent_state().children[0] is not step.to_parent_state().children[0]


def test_load_state_files_share_routes(tmp_path):
    prev = tmp_path / "prev.json"
    nxt = tmp_path / "next.json"
    prev.write_text('{"index": 0, "children": [{"key": "a"}, {"key": "b"}]}', encoding="utf-8")
    nxt.write_text('{"index": 0, "children": [{"key": "a"}]}', encoding="utf-8")

    interner = RouteInterner()
    prev_state = load_state(str(prev)).to_parent_state(interner)
    next_state = load_state(str(nxt)).to_parent_state(interner)

    assert next_state.children[0] is prev_state.children[0]
    assert len(interner) == 2
