import os

import pytest

from io_utils.loaders import load_tree_csv
from logic import build_tree, update_tree

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def fixture_path(filename):
    return os.path.join(FIXTURES, filename)


def make_tree(spec):
    """
    Build a tree from a nested (name, rule_or_question, children) tuple.
    Internal nodes carry a rule, leaves a question.
    """
    nodes, edges = [], []

    def walk(item, parent=None):
        name, text, children = item
        if children:
            nodes.append({"name": name, "rule": text})
        else:
            nodes.append({"name": name, "question": text})
        if parent is not None:
            edges.append((parent, name))
        for child in children:
            walk(child, name)

    walk(spec)
    return build_tree(nodes, edges)


def leaf(name):
    return (name, f"Is {name} true?", [])


@pytest.fixture
def ethical_tree():
    """The investment example, loaded and updated with no answers."""
    return update_tree(load_tree_csv(fixture_path("ethical.csv")))


@pytest.fixture
def or_of_and_tree():
    """Root(OR) -> [a1, B(AND) -> [b1, b2]]."""
    return update_tree(make_tree(("Root", "OR", [leaf("a1"), ("B", "AND", [leaf("b1"), leaf("b2")])])))
