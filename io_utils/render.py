# io_utils/render.py
"""Plain-text rendering of a tree and its current state."""

from typing import List

from logic.tree import AndOrTree
from utils.constants import RENDER_COLUMNS
from utils.helpers import confidence_to_level


def _pad_to(line: str, column: int) -> str:
    return line + " " * max(1, column - len(line))


def _format_line(tree: AndOrTree, node_id: int, prefix: str) -> str:
    spec = tree.spec(node_id)
    st = tree.states[node_id]
    name_width = RENDER_COLUMNS["Rule"] - 2

    name = spec.name
    if len(prefix) + len(name) > name_width:
        keep = max(1, name_width - len(prefix) - 3)
        name = name[:keep] + "..."

    rule = spec.rule or ""
    answer = "" if st.answer is None else str(st.answer).upper()
    confidence = ""
    if st.confidence is not None:
        if spec.is_leaf:
            confidence = str(confidence_to_level(st.confidence))
        else:
            confidence = f"{round(st.confidence * 100, 1)}%"

    line = _pad_to(prefix + name, RENDER_COLUMNS["Rule"]) + rule
    line = _pad_to(line, RENDER_COLUMNS["Answer"]) + answer
    line = _pad_to(line, RENDER_COLUMNS["Confidence"]) + confidence
    return line.rstrip()


def _format_children(tree: AndOrTree, node_id: int, ancestors_last: List[bool], lines: List[str]) -> None:
    children = tree.spec(node_id).children
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        indent = "".join("    " if last else "|   " for last in ancestors_last)
        connector = "`-- " if is_last else "|-- "
        lines.append(_format_line(tree, child, indent + connector))
        _format_children(tree, child, ancestors_last + [is_last], lines)


def format_tree(tree: AndOrTree) -> str:
    """
    Aligned text view with Tree / Rule / Answer / Confidence columns.
    Leaf confidence is shown on the 0-5 scale, node confidence as a percentage.
    """
    header = "".join([
        "Tree".ljust(RENDER_COLUMNS["Rule"]),
        "Rule".ljust(RENDER_COLUMNS["Answer"] - RENDER_COLUMNS["Rule"]),
        "Answer".ljust(RENDER_COLUMNS["Confidence"] - RENDER_COLUMNS["Answer"]),
        "Confidence",
    ])
    lines = [header, _format_line(tree, tree.root_id, "")]
    _format_children(tree, tree.root_id, [], lines)
    return "\n".join(lines)


def print_tree(tree: AndOrTree) -> AndOrTree:
    print(format_tree(tree))
    return tree
