# logic/influence.py
"""
Question prioritisation indices.

Every internal node gets a one-hop true_index / false_index from its rule and
the number n of its still-unanswered children:

    AND: true_index = 1/n, false_index = 1.0
    OR:  true_index = 1.0, false_index = 1/n

A leaf's influence is the product of these indices along its ancestor chain,
computed separately for a TRUE and a FALSE answer. Leaves that are answered, or
that sit under an already resolved node, have no influence (None).
"""

from dataclasses import replace
from typing import Optional

import numpy as np

from utils.constants import RULE_AND, RULE_OR
from utils.helpers import normalize_rule
from .tree import AndOrTree, NodeState, State
from .propagate import calculate_tree


def node_indices(rule, unanswered_count: int):
    """(true_index, false_index) for one internal node; (None, None) for an unknown rule."""
    n = unanswered_count if unanswered_count > 0 else 1
    rule = normalize_rule(rule)
    if rule == RULE_AND:
        return 1.0 / n, 1.0
    if rule == RULE_OR:
        return 1.0, 1.0 / n
    return None, None


def assign_indices(tree: AndOrTree, state: Optional[State] = None) -> State:
    """Return a new state map with true_index / false_index set on every internal node."""
    source = tree.states if state is None else state
    result: State = dict(source)
    for node_id in tree.internal_ids():
        spec = tree.spec(node_id)
        unanswered = sum(1 for child in spec.children if source[child].answer is None)
        true_index, false_index = node_indices(spec.rule, unanswered)
        result[node_id] = replace(source[node_id], true_index=true_index, false_index=false_index)
    return result


def leaf_influence(tree: AndOrTree, state: State, leaf_id: int) -> NodeState:
    """Influence fields for a single leaf, returned as its new NodeState."""
    leaf_state = state[leaf_id]
    ancestors = tree.ancestors(leaf_id)

    if leaf_state.answer is not None or any(state[a].answer is not None for a in ancestors):
        return replace(leaf_state, influence_if_true=None, influence_if_false=None, influence_index=None)

    true_indices = [state[a].true_index for a in ancestors if state[a].true_index is not None]
    false_indices = [state[a].false_index for a in ancestors if state[a].false_index is not None]
    if_true = float(np.prod(true_indices))
    if_false = float(np.prod(false_indices))
    return replace(
        leaf_state,
        influence_if_true=if_true,
        influence_if_false=if_false,
        influence_index=if_true + if_false,
    )


def calculate_influence(tree: AndOrTree, state: Optional[State] = None, leaf_id: Optional[int] = None):
    """
    Calculate leaf influence from the ancestors' indices.

    Args:
        tree: Tree providing the structure
        state: State map holding answers and indices (defaults to the tree's state)
        leaf_id: If given, only this leaf is evaluated and its NodeState returned

    Returns:
        New state map with influence set on every leaf, or a single NodeState
        when leaf_id is given
    """
    source = tree.states if state is None else state
    if leaf_id is not None:
        return leaf_influence(tree, source, leaf_id)

    result: State = dict(source)
    for node_id in tree.leaf_ids():
        result[node_id] = leaf_influence(tree, source, node_id)
    return result


def update_tree(tree: AndOrTree) -> AndOrTree:
    """
    Propagate answers, then recompute indices and influence, and commit the result.

    Call after one or more set_answer() calls and before any ranking or
    sensitivity query. Returns the same tree for chaining.
    """
    state = calculate_tree(tree)
    state = assign_indices(tree, state)
    state = calculate_influence(tree, state)
    tree._commit(state)
    return tree
