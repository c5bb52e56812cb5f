# tests/test_tree_builder.py

from __future__ import annotations

from pathlib import Path

import pytest

import family_tree.loader.tree_builder as tree_builder_module
from family_tree.core.exceptions import MalformedLineError, ParentNotFoundError
from family_tree.loader import TreeBuilder, build_tree, load_tree
from family_tree.tree import FamilyTree
from family_tree.utils import mock_file_path


def _children(tree: FamilyTree, name: str) -> list:
    return [c.name for c in tree.find_by_name(name).children]


def test_build_tree_returns_family_tree_instance() -> None:
    tree = build_tree(["A:B"])
    assert isinstance(tree, FamilyTree)
    assert tree.root is not None


def test_first_line_parent_becomes_root() -> None:
    tree = build_tree(["A:B,C", "B:D,E", "C:F"])

    assert tree.root.name == "A"
    assert tree.root.parent is None
    assert _children(tree, "A") == ["B", "C"]
    assert _children(tree, "B") == ["D", "E"]
    assert _children(tree, "C") == ["F"]


def test_exactly_one_root_and_every_other_node_has_parent() -> None:
    tree = load_tree(mock_file_path("hobbits.txt"))

    roots = [n for n in tree.iter_nodes() if n.parent is None]
    assert roots == [tree.root]
    for node in tree.iter_nodes():
        if node is not tree.root:
            assert node in node.parent.children


def test_redeclaring_root_adds_children_to_existing_root() -> None:
    tree = build_tree(["A:B", "A:C"])

    assert tree.root.name == "A"
    assert _children(tree, "A") == ["B", "C"]
    assert tree.node_count() == 3


def test_redeclaring_existing_node_adds_more_children() -> None:
    tree = build_tree(["A:B,C", "B:D", "C:F", "B:E"])

    b = tree.find_by_name("B")
    assert [c.name for c in b.children] == ["D", "E"]
    assert b.parent is tree.root


def test_child_names_are_always_new_nodes() -> None:
    tree = build_tree(["A:B,C", "B:C"])

    # Two distinct "C" nodes; the first one stays under A.
    first_c = tree.find_by_name("C")
    assert first_c.parent.name == "B"
    assert [c.name for c in tree.root.children] == ["B", "C"]
    assert tree.node_count() == 4


def test_trailing_comma_creates_empty_named_child() -> None:
    tree = build_tree(["A:B,"])
    assert _children(tree, "A") == ["B", ""]


def test_parent_label_whitespace_is_significant() -> None:
    with pytest.raises(ParentNotFoundError):
        build_tree(["A:B", " B:C"])


def test_malformed_line_aborts_and_keeps_earlier_nodes() -> None:
    builder = TreeBuilder()

    with pytest.raises(MalformedLineError) as excinfo:
        builder.add_lines(["A:B,C", "XYZ", "C:F"])

    assert excinfo.value.lineno == 2
    tree = builder.tree
    assert tree.root.name == "A"
    assert _children(tree, "A") == ["B", "C"]
    assert tree.find_by_name("F") is None
    assert builder.lines_applied == 1


def test_unknown_parent_raises_parent_not_found() -> None:
    with pytest.raises(ParentNotFoundError) as excinfo:
        build_tree(["A:B", "Z:W"])

    err = excinfo.value
    assert err.parent == "Z"
    assert err.line == "Z:W"
    assert err.lineno == 2


def test_add_line_on_existing_tree() -> None:
    tree = build_tree(["A:B"])
    builder = TreeBuilder(tree)

    parent = builder.add_line("B:C")

    assert parent is tree.find_by_name("B")
    assert builder.tree is tree
    assert _children(tree, "B") == ["C"]


def test_generator_source_is_closed_on_error() -> None:
    state = {"closed": False}

    def source():
        try:
            yield "A:B"
            yield "oops"
            yield "B:C"
        finally:
            state["closed"] = True

    with pytest.raises(MalformedLineError):
        build_tree(source())

    assert state["closed"] is True


def test_load_tree_from_mock_file() -> None:
    tree = load_tree(mock_file_path("simple.txt"))
    assert tree.render() == "A\n  B\n    D\n    E\n  C\n    F\n"


def test_load_tree_handles_crlf_line_endings() -> None:
    tree = load_tree(mock_file_path("crlf.txt"))
    assert [n.name for n in tree.iter_nodes()] == ["A", "B", "C"]


def test_load_tree_malformed_file() -> None:
    with pytest.raises(MalformedLineError):
        load_tree(mock_file_path("malformed.txt"))


def test_load_tree_closes_file_after_malformed_line(monkeypatch) -> None:
    opened = []
    sources = []
    real_open = Path.open
    real_iter_lines = tree_builder_module.iter_lines

    def recording_open(self, *args, **kwargs):
        handle = real_open(self, *args, **kwargs)
        opened.append(handle)
        return handle

    def recording_iter_lines(*args, **kwargs):
        source = real_iter_lines(*args, **kwargs)
        sources.append(source)
        return source

    monkeypatch.setattr(Path, "open", recording_open)
    monkeypatch.setattr(tree_builder_module, "iter_lines", recording_iter_lines)

    with pytest.raises(MalformedLineError):
        load_tree(mock_file_path("malformed.txt"))

    assert len(sources) == 1
    assert sources[0].gi_frame is None
    assert len(opened) == 1
    assert opened[0].closed


def test_load_tree_orphan_parent_file() -> None:
    with pytest.raises(ParentNotFoundError):
        load_tree(mock_file_path("orphan_parent.txt"))


def test_blank_line_in_file_fails(write_tree) -> None:
    path = write_tree(["A:B", "", "B:C"])
    with pytest.raises(MalformedLineError) as excinfo:
        load_tree(path)
    assert excinfo.value.lineno == 2


def test_bom_on_first_added_line_is_dropped_without_line_number() -> None:
    builder = TreeBuilder()
    builder.add_line("\ufeffA:B")

    assert builder.tree.root.name == "A"


def test_bom_kept_once_the_tree_has_a_root() -> None:
    builder = TreeBuilder()
    builder.add_line("A:B")

    with pytest.raises(ParentNotFoundError):
        builder.add_line("\ufeffA:C", lineno=2)


def test_bom_in_file_is_dropped(tmp_path) -> None:
    path = tmp_path / "bom.txt"
    path.write_bytes("\ufeffA:B\nB:C\n".encode("utf-8"))

    tree = load_tree(path)
    assert [n.name for n in tree.iter_nodes()] == ["A", "B", "C"]
