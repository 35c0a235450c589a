# io_utils/visualize.py
"""
Interactive HTML network of a tree's current state (pyvis).
Nodes are coloured by answer: green TRUE, red FALSE, grey unknown.
"""

import json
from typing import Dict

from pyvis.network import Network

from logic.tree import AndOrTree
from utils.helpers import confidence_to_level

ANSWER_COLORS = {True: "#16a34a", False: "#dc2626", None: "#9ca3af"}


def _apply_pyvis_options(net: Network, hierarchical: bool):
    """
    Set pyvis options with valid JSON (NOT JavaScript).
    We build JSON via json.dumps to avoid JSONDecode errors in pyvis/options.py.
    """
    if hierarchical:
        options = {
            "layout": {
                "hierarchical": {
                    "enabled": True,
                    "direction": "UD",
                    "sortMethod": "directed"
                }
            },
            "physics": {"enabled": False},
            "nodes": {"size": 12},
            "edges": {"arrows": {"to": {"enabled": True}}}
        }
    else:
        options = {
            "physics": {"enabled": True, "stabilization": {"enabled": True}},
            "nodes": {"size": 12},
            "edges": {"arrows": {"to": {"enabled": True}}}
        }
    net.set_options(json.dumps(options))


def node_attributes(tree: AndOrTree, node_id: int) -> Dict[str, str]:
    """Label, tooltip, shape and colour for one node."""
    spec = tree.spec(node_id)
    st = tree.states[node_id]

    lines = [spec.name]
    if spec.is_leaf:
        lines.append(f"Question: {spec.question or ''}")
        if st.confidence is not None:
            lines.append(f"Confidence: {confidence_to_level(st.confidence)}/5")
        if st.influence_index is not None:
            lines.append(
                f"Influence: {st.influence_index:.2f} "
                f"(true {st.influence_if_true:.2f}, false {st.influence_if_false:.2f})"
            )
    else:
        lines.append(f"Rule: {spec.rule or ''}")
        if st.confidence is not None:
            lines.append(f"Confidence: {round(st.confidence * 100, 1)}%")
    if st.answer is not None:
        lines.append(f"Answer: {str(st.answer).upper()}")

    label = spec.name if spec.is_leaf else f"{spec.name} [{spec.rule or '?'}]"
    return {
        "label": label,
        "title": "\n".join(lines),
        "shape": "box" if spec.is_leaf else "ellipse",
        "color": ANSWER_COLORS[st.answer],
    }


def build_network(tree: AndOrTree, hierarchical: bool = True,
                  height: str = "650px", width: str = "100%") -> Network:
    """Directed pyvis network with one node per tree node and parent -> child edges."""
    net = Network(height=height, width=width, directed=True, notebook=False, cdn_resources="remote")
    _apply_pyvis_options(net, hierarchical=hierarchical)

    order = list(tree.iter_pre_order())
    for node_id in order:
        net.add_node(node_id, **node_attributes(tree, node_id))
    for node_id in order:
        for child in tree.spec(node_id).children:
            net.add_edge(node_id, child)
    return net


def save_tree_html(tree: AndOrTree, file_path: str, hierarchical: bool = True) -> str:
    """Write the network view to an HTML file and return the path."""
    net = build_network(tree, hierarchical=hierarchical)
    net.write_html(str(file_path))
    return file_path
