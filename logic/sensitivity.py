# logic/sensitivity.py
"""
Sensitivity analysis: which single action would raise the root confidence most.

Each candidate is simulated on a copy of the state map (the structure is shared),
re-propagated with calculate_tree(), and compared with the current root
confidence. Two kinds of action are considered:

- answering an unanswered leaf TRUE or FALSE with full confidence
- raising an answered leaf with confidence < 1.0 to full confidence
"""

import logging
from dataclasses import replace
from typing import Dict, Optional

import pandas as pd

from utils.constants import (
    ACTION_ANSWER_NEW, ACTION_INCREASE_CONFIDENCE, BOOSTER_COLUMNS,
    DEFAULT_TOP_N, MAX_CONFIDENCE,
)
from utils.helpers import confidence_to_level
from .tree import AndOrTree, State
from .propagate import calculate_tree

logger = logging.getLogger(__name__)


def simulate_root_confidence(tree: AndOrTree, leaf_id: int, answer: Optional[bool] = None,
                             confidence: float = MAX_CONFIDENCE, state: Optional[State] = None) -> Optional[float]:
    """
    Root confidence after changing one leaf on a copy of the state map.

    Args:
        tree: Tree providing the structure
        leaf_id: Leaf to change
        answer: New answer, or None to keep the current one
        confidence: New confidence score
        state: Base state map (defaults to the tree's state); never modified

    Returns:
        The simulated root confidence, or None if the root stays unresolved
    """
    trial = dict(tree.states if state is None else state)
    leaf_state = trial[leaf_id]
    trial[leaf_id] = replace(
        leaf_state,
        answer=leaf_state.answer if answer is None else answer,
        confidence=confidence,
    )
    return calculate_tree(tree, trial)[tree.root_id].confidence


def _gain(simulated: Optional[float], current: float) -> float:
    return 0.0 if simulated is None else simulated - current


def get_confidence_boosters(tree: AndOrTree, top_n: int = DEFAULT_TOP_N) -> Optional[pd.DataFrame]:
    """
    Rank the actions that would most increase the root confidence.

    Args:
        tree: Updated tree whose root has been resolved
        top_n: Maximum number of suggestions

    Returns:
        DataFrame with columns name, question, action, detail, potential_gain
        (raw fractional gain), sorted by gain descending then name. Empty if no
        action helps. None if the root has no conclusion yet.
    """
    root_state = tree.root_state
    if root_state.answer is None or root_state.confidence is None:
        logger.info("Cannot provide guidance until an initial conclusion is reached.")
        return None

    current = root_state.confidence
    base = tree.copy_state()
    suggestions: Dict[str, Dict] = {}

    unanswered = [i for i in tree.leaf_ids() if base[i].answer is None]
    logger.debug("Analysing %d unanswered questions", len(unanswered))
    for leaf_id in unanswered:
        spec = tree.spec(leaf_id)
        gain_true = _gain(simulate_root_confidence(tree, leaf_id, True, state=base), current)
        gain_false = _gain(simulate_root_confidence(tree, leaf_id, False, state=base), current)
        if gain_true > gain_false:
            detail, gain = "Suggest answering TRUE", gain_true
        else:
            detail, gain = "Suggest answering FALSE", gain_false
        suggestions[spec.name] = {
            "name": spec.name,
            "question": spec.question,
            "action": ACTION_ANSWER_NEW,
            "detail": detail,
            "potential_gain": gain,
        }

    answered = [
        i for i in tree.leaf_ids()
        if base[i].answer is not None and base[i].confidence is not None and base[i].confidence < MAX_CONFIDENCE
    ]
    logger.debug("Analysing %d existing answers", len(answered))
    for leaf_id in answered:
        spec = tree.spec(leaf_id)
        gain = _gain(simulate_root_confidence(tree, leaf_id, state=base), current)
        previous = suggestions.get(spec.name)
        if gain > 0 and (previous is None or gain > previous["potential_gain"]):
            suggestions[spec.name] = {
                "name": spec.name,
                "question": spec.question,
                "action": ACTION_INCREASE_CONFIDENCE,
                "detail": f"Current conf: {confidence_to_level(base[leaf_id].confidence)}/5",
                "potential_gain": gain,
            }

    df = pd.DataFrame(list(suggestions.values()), columns=BOOSTER_COLUMNS)
    df = df[df["potential_gain"] > 0]
    if df.empty:
        logger.info("No further actions found to boost confidence.")
        return pd.DataFrame(columns=BOOSTER_COLUMNS)

    df = df.sort_values(["potential_gain", "name"], ascending=[False, True], kind="stable")
    return df.head(max(int(top_n), 0)).reset_index(drop=True)
