# logic/queries.py
"""
Read-only queries over an updated tree.
All results are DataFrames so they can be shown, filtered or exported directly.
"""

import logging
from typing import Tuple

import pandas as pd

from utils.constants import (
    SORT_BOTH, SORT_COLUMNS, INFLUENCE_COLUMNS, QUESTION_COLUMNS, BOOSTER_COLUMNS,
    DEFAULT_TOP_N, NEXT_QUESTIONS_TOP_N, MAX_CONFIDENCE,
    MODE_INFLUENCE, MODE_BOOSTERS, MODE_FINISHED,
)
from utils.helpers import normalize_text, confidence_to_level
from .tree import AndOrTree
from .sensitivity import get_confidence_boosters

logger = logging.getLogger(__name__)


def _sort_key(sort_by) -> str:
    key = normalize_text(sort_by).upper()
    if key not in SORT_COLUMNS:
        logger.warning("Unknown sort_by %r, sorting by %s", sort_by, SORT_BOTH)
        key = SORT_BOTH
    return SORT_COLUMNS[key]


def get_questions(tree: AndOrTree) -> pd.DataFrame:
    """
    Summarise every leaf in pre-order.

    Returns:
        DataFrame with name, question, answer, confidence (0-5 scale),
        influence_if_true, influence_if_false and influence_index
    """
    rows = []
    for leaf_id in tree.leaf_ids():
        spec = tree.spec(leaf_id)
        st = tree.states[leaf_id]
        rows.append({
            "name": spec.name,
            "question": spec.question,
            "answer": st.answer,
            "confidence": confidence_to_level(st.confidence),
            "influence_if_true": st.influence_if_true,
            "influence_if_false": st.influence_if_false,
            "influence_index": st.influence_index,
        })
    return pd.DataFrame(rows, columns=QUESTION_COLUMNS)


def get_highest_influence(tree: AndOrTree, top_n: int = DEFAULT_TOP_N, sort_by=SORT_BOTH) -> pd.DataFrame:
    """
    Rank the unanswered, still relevant leaves by influence.

    Args:
        tree: Updated tree
        top_n: Maximum number of leaves to return
        sort_by: "TRUE" (rule-in), "FALSE" (rule-out) or "BOTH" (default)

    Returns:
        DataFrame with name, question, influence_if_true, influence_if_false and
        influence_index, sorted by the chosen column descending and then by name.
    """
    column = _sort_key(sort_by)
    rows = []
    for leaf_id in tree.leaf_ids():
        st = tree.states[leaf_id]
        if st.influence_index is None:
            continue
        spec = tree.spec(leaf_id)
        rows.append({
            "name": spec.name,
            "question": spec.question,
            "influence_if_true": st.influence_if_true,
            "influence_if_false": st.influence_if_false,
            "influence_index": st.influence_index,
        })

    df = pd.DataFrame(rows, columns=INFLUENCE_COLUMNS)
    if df.empty:
        return df
    df = df.sort_values([column, "name"], ascending=[False, True], kind="stable")
    return df.head(max(int(top_n), 0)).reset_index(drop=True)


def get_next_questions(tree: AndOrTree, top_n: int = NEXT_QUESTIONS_TOP_N,
                       sort_by=SORT_BOTH) -> Tuple[str, pd.DataFrame]:
    """
    Pick what to ask next.

    Returns:
        (mode, suggestions):
        - ("influence", ranking) while the root is unresolved
        - ("boosters", confidence boosters) once it is resolved
        - ("finished", empty frame) when the root is resolved with full confidence
    """
    root_state = tree.root_state
    if root_state.answer is None:
        return MODE_INFLUENCE, get_highest_influence(tree, top_n=top_n, sort_by=sort_by)
    if root_state.confidence is not None and root_state.confidence >= MAX_CONFIDENCE:
        return MODE_FINISHED, pd.DataFrame(columns=BOOSTER_COLUMNS)
    boosters = get_confidence_boosters(tree, top_n=top_n)
    if boosters is None:
        boosters = pd.DataFrame(columns=BOOSTER_COLUMNS)
    return MODE_BOOSTERS, boosters
