import pandas as pd
import pytest

from io_utils.loaders import (
    load_tree_df, load_tree_csv, load_tree_node_list, load_tree_yaml, load_tree_json,
    load_tree_df_path, load_tree_csv_path,
)

from conftest import fixture_path


def _shape(tree):
    """Structure keyed by name, independent of the integer ids."""
    shape = {}
    for node_id in tree.iter_pre_order():
        spec = tree.spec(node_id)
        parent = None if spec.parent is None else tree.spec(spec.parent).name
        shape[spec.name] = (
            spec.rule, spec.question, parent,
            tuple(tree.spec(c).name for c in spec.children),
        )
    return shape


class TestRelational:
    """Test id/parent loaders."""

    def test_csv(self):
        tree = load_tree_csv(fixture_path("ethical.csv"))
        assert tree.root.name == "Invest in Company X"
        assert tree.root.rule == "AND"
        assert len(tree) == 34
        assert len(tree.leaf_ids()) == 23
        assert tree.find("FIN1").question.startswith("Has revenue grown")

    def test_df_with_float_parent_ids(self):
        df = pd.DataFrame({
            "id": [1, 2, 3],
            "name": ["Root", "L1", "L2"],
            "question": [None, "First?", "Second?"],
            "rule": ["OR", None, None],
            "parent": [None, 1, 1],
        })
        assert df["parent"].dtype.kind == "f"
        tree = load_tree_df(df)
        assert [tree.spec(c).name for c in tree.root.children] == ["L1", "L2"]
        assert tree.find("L1").rule is None

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_tree_csv(fixture_path("does_not_exist.csv"))


class TestHierarchical:
    """Test nested node-list loaders."""

    def test_yaml_matches_csv(self):
        assert _shape(load_tree_yaml(fixture_path("ethical.yml"))) == _shape(load_tree_csv(fixture_path("ethical.csv")))

    def test_small_formats_agree(self):
        csv_tree = load_tree_csv(fixture_path("small_tree.csv"))
        assert _shape(load_tree_json(fixture_path("small_tree.json"))) == _shape(csv_tree)
        assert _shape(load_tree_yaml(fixture_path("small_tree.yml"))) == _shape(csv_tree)

    def test_node_list_unnamed(self):
        tree = load_tree_node_list({
            "name": "Root",
            "rule": "AND",
            "nodes": [{"question": "Anonymous?"}, {"name": "Named", "question": "Named?"}],
        })
        assert [tree.spec(c).name for c in tree.root.children] == ["Unnamed Node", "Named"]

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="JSON"):
            load_tree_json(fixture_path("invalid.json"))

    def test_invalid_yaml(self):
        with pytest.raises(ValueError, match="YAML"):
            load_tree_yaml(fixture_path("invalid.yml"))

    def test_missing_yaml(self):
        with pytest.raises(FileNotFoundError):
            load_tree_yaml(fixture_path("nope.yml"))


class TestPath:
    """Test path-string loaders."""

    def test_csv_matches_relational(self):
        path_tree = load_tree_csv_path(fixture_path("ethical_path.csv"))
        assert _shape(path_tree) == _shape(load_tree_csv(fixture_path("ethical.csv")))

    def test_missing_intermediate_nodes_created(self):
        df = pd.DataFrame({
            "path": ["R", "R/A/x", "R/A/y"],
            "question": [None, "x?", "y?"],
            "rule": ["OR", None, None],
        })
        tree = load_tree_df_path(df)
        assert tree.root.name == "R"
        a = tree.find("A")
        assert a is not None
        assert a.rule is None
        assert [tree.spec(c).name for c in a.children] == ["x", "y"]

    def test_custom_delimiter(self):
        df = pd.DataFrame({"path": ["R", "R>x"], "question": [None, "x?"], "rule": ["AND", None]})
        tree = load_tree_df_path(df, delim=">")
        assert tree.find("x").parent == tree.root_id
