# logic/propagate.py
"""
Bottom-up propagation of answers and confidence.

OR nodes:  TRUE as soon as one child is TRUE, FALSE only once every child is
           answered and none is TRUE. Confidence is noisy-OR, 1 - prod(1 - c),
           over the deciding children.
AND nodes: FALSE as soon as one child is FALSE, TRUE only once every child is
           answered and none is FALSE. Confidence is prod(c) over the deciding
           children.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

import numpy as np

from utils.constants import RULE_AND, RULE_OR
from utils.helpers import normalize_rule
from .tree import AndOrTree, NodeState, State


def _noisy_or(confidences: List[float]) -> Optional[float]:
    if not confidences:
        return None
    return float(1.0 - np.prod([1.0 - c for c in confidences]))


def _product(confidences: List[float]) -> Optional[float]:
    if not confidences:
        return None
    return float(np.prod(confidences))


def _known(values) -> List[float]:
    return [c for c in values if c is not None]


def resolve_node(rule, children: List[NodeState]) -> Tuple[Optional[bool], Optional[float]]:
    """
    Answer and confidence of one internal node from its children's states.

    Returns (None, None) when the node cannot be decided yet, has no children,
    or carries a rule other than AND/OR.
    """
    if not children:
        return None, None
    rule = normalize_rule(rule)
    answers = [ch.answer for ch in children]
    all_answered = all(a is not None for a in answers)

    if rule == RULE_OR:
        if any(a is True for a in answers):
            deciding = [ch.confidence for ch in children if ch.answer is True]
            return True, _noisy_or(_known(deciding))
        if all_answered:
            return False, _noisy_or(_known(ch.confidence for ch in children))
    elif rule == RULE_AND:
        if any(a is False for a in answers):
            deciding = [ch.confidence for ch in children if ch.answer is False]
            return False, _product(_known(deciding))
        if all_answered:
            return True, _product(_known(ch.confidence for ch in children))
    return None, None


def calculate_tree(tree: AndOrTree, state: Optional[State] = None) -> State:
    """
    Recalculate answer and confidence for every internal node.

    Args:
        tree: Tree providing the structure
        state: State map to start from (defaults to the tree's current state);
            leaf entries are taken as the evidence

    Returns:
        New state map. Leaves are copied unchanged; internal nodes are reset to
        unknown and recomputed in post-order, so the result depends only on the
        leaf answers. The input map is not modified.
    """
    source = tree.states if state is None else state
    result: State = dict(source)

    for node_id in tree.iter_post_order():
        spec = tree.spec(node_id)
        if spec.is_leaf:
            continue
        children = [result[child] for child in spec.children]
        answer, confidence = resolve_node(spec.rule, children)
        result[node_id] = replace(source[node_id], answer=answer, confidence=confidence)

    return result
