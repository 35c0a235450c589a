# io_utils/loaders.py
"""
Loaders that turn tree descriptions into AndOrTree objects.

Three layouts are supported, each as an in-memory object and as a file:

- relational:   rows of id, name, question, rule, parent (DataFrame / CSV)
- hierarchical: nested mappings with name, rule, question and a 'nodes' list (dict / YAML / JSON)
- path string:  rows with a 'path' such as "Root/Branch/Leaf" plus question, rule (DataFrame / CSV)

Structure is not validated here beyond what linking the nodes requires.
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Tuple

import pandas as pd
import yaml

from logic.tree import AndOrTree, build_tree
from utils.constants import CHILDREN_KEY, PATH_COLUMN, PATH_DELIMITER, UNNAMED_NODE
from utils.helpers import normalize_id, normalize_text, optional_text

logger = logging.getLogger(__name__)


def _require_file(file_path: str) -> None:
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found at path: {file_path}")


def _log_built(tree: AndOrTree, source: str) -> AndOrTree:
    logger.info("Loaded tree '%s' from %s: %d nodes, %d leaves",
                tree.root.name, source, len(tree), len(tree.leaf_ids()))
    return tree


# -----------------------------
# Relational (id / parent)
# -----------------------------

def load_tree_df(df: pd.DataFrame) -> AndOrTree:
    """
    Build a tree from a relational DataFrame.

    Args:
        df: Columns id, name, question, rule, parent; the root has a blank parent

    Returns:
        AndOrTree with all answers unknown
    """
    nodes: List[Dict[str, Any]] = []
    names_by_id: Dict[str, str] = {}
    parents: List[Tuple[str, str]] = []

    for _, row in df.iterrows():
        name = normalize_text(row.get("name", ""))
        nodes.append({
            "name": name,
            "question": optional_text(row.get("question")),
            "rule": optional_text(row.get("rule")),
        })
        node_id = normalize_id(row.get("id"))
        if node_id is not None:
            names_by_id[node_id] = name
        parent_id = normalize_id(row.get("parent"))
        if parent_id is not None:
            parents.append((parent_id, name))

    edges = [(names_by_id[parent_id], child) for parent_id, child in parents]
    return _log_built(build_tree(nodes, edges), "relational data")


def load_tree_csv(file_path: str) -> AndOrTree:
    """Read a relational CSV (id, name, question, rule, parent) and build the tree."""
    _require_file(file_path)
    df = pd.read_csv(file_path)
    return load_tree_df(df)


# -----------------------------
# Hierarchical (nested nodes)
# -----------------------------

def _flatten_node_list(item: Mapping[str, Any], nodes: List[Dict[str, Any]],
                       edges: List[Tuple[str, str]], parent: str = None) -> None:
    name = normalize_text(item.get("name")) or UNNAMED_NODE
    nodes.append({"name": name, "rule": item.get("rule"), "question": item.get("question")})
    if parent is not None:
        edges.append((parent, name))
    children = item.get(CHILDREN_KEY)
    if isinstance(children, list):
        for child in children:
            _flatten_node_list(child, nodes, edges, parent=name)


def load_tree_node_list(data_list: Mapping[str, Any]) -> AndOrTree:
    """
    Build a tree from a nested mapping.

    Each level has a 'name', optionally 'rule' or 'question', and its children
    under 'nodes'. A missing name becomes "Unnamed Node".
    """
    nodes: List[Dict[str, Any]] = []
    edges: List[Tuple[str, str]] = []
    _flatten_node_list(data_list, nodes, edges)
    return _log_built(build_tree(nodes, edges), "node list")


def load_tree_yaml(file_path: str) -> AndOrTree:
    """Read a hierarchical YAML file and build the tree."""
    _require_file(file_path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to read or parse the YAML file '{file_path}': {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Failed to read or parse the YAML file '{file_path}': expected a mapping at the top level")
    return load_tree_node_list(data)


def load_tree_json(file_path: str) -> AndOrTree:
    """Read a hierarchical JSON file and build the tree."""
    _require_file(file_path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to read or parse the JSON file '{file_path}': {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Failed to read or parse the JSON file '{file_path}': expected an object at the top level")
    return load_tree_node_list(data)


# -----------------------------
# Path strings
# -----------------------------

def load_tree_df_path(df: pd.DataFrame, delim: str = PATH_DELIMITER) -> AndOrTree:
    """
    Build a tree from a DataFrame with a 'path' column.

    The node name is the last path segment. Segments that never get a row of
    their own are created as bare nodes so every path is connected.
    """
    records: Dict[Tuple[str, ...], Dict[str, Any]] = {}
    edges: List[Tuple[str, str]] = []

    def ensure(parts: Tuple[str, ...]) -> Dict[str, Any]:
        if parts not in records:
            if len(parts) > 1:
                ensure(parts[:-1])
                edges.append((parts[-2], parts[-1]))
            records[parts] = {"name": parts[-1]}
        return records[parts]

    for _, row in df.iterrows():
        parts = tuple(p.strip() for p in normalize_text(row.get(PATH_COLUMN, "")).split(delim) if p.strip())
        if not parts:
            continue
        record = ensure(parts)
        record["rule"] = optional_text(row.get("rule"))
        record["question"] = optional_text(row.get("question"))

    return _log_built(build_tree(list(records.values()), edges), "path data")


def load_tree_csv_path(file_path: str, delim: str = PATH_DELIMITER) -> AndOrTree:
    """Read a path-string CSV and build the tree."""
    _require_file(file_path)
    df = pd.read_csv(file_path)
    return load_tree_df_path(df, delim=delim)
