# logic/answers.py
"""
Setting evidence on leaves.

set_answer() never recomputes the tree: several answers can be entered before a
single update_tree() call.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from utils.helpers import is_valid_level, level_to_confidence
from .tree import AndOrTree

logger = logging.getLogger(__name__)

NOT_FOUND = "not_found"
INVALID_TARGET = "invalid_target"
INVALID_RESPONSE = "invalid_response"
INVALID_CONFIDENCE = "invalid_confidence"


@dataclass(frozen=True)
class AnswerOutcome:
    """
    Result of set_answer().

    Attributes:
        ok: Whether the leaf was updated
        node_name: Name that was requested
        error: One of the error codes above when ok is False
        message: Human-readable description
    """
    ok: bool
    node_name: str
    error: Optional[str] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok


def _failure(node_name: str, error: str, message: str) -> AnswerOutcome:
    logger.warning(message)
    return AnswerOutcome(ok=False, node_name=node_name, error=error, message=message)


def set_answer(tree: AndOrTree, node_name: str, response, confidence_level) -> AnswerOutcome:
    """
    Set the answer and confidence of a leaf.

    Args:
        tree: Tree to modify
        node_name: Name of the leaf
        response: True or False
        confidence_level: 0-5, mapped to a score of 0.5 + level / 10

    Returns:
        AnswerOutcome; on failure the tree is left unchanged
    """
    spec = tree.find(node_name)
    if spec is None:
        return _failure(node_name, NOT_FOUND, f"Node '{node_name}' not found in the tree.")
    if not spec.is_leaf:
        return _failure(
            node_name, INVALID_TARGET,
            f"Node '{node_name}' is a parent node. Answers can only be set for leaves.",
        )
    if not isinstance(response, (bool, np.bool_)):
        return _failure(node_name, INVALID_RESPONSE, "Invalid response. Please provide True or False.")
    if not is_valid_level(confidence_level):
        return _failure(
            node_name, INVALID_CONFIDENCE,
            f"Invalid confidence level {confidence_level!r}. Please provide a number from 0 to 5.",
        )

    state = tree.copy_state()
    state[spec.id] = replace(
        state[spec.id],
        answer=bool(response),
        confidence=level_to_confidence(confidence_level),
    )
    tree._commit(state)

    message = f"Answer for leaf '{node_name}' set to: {bool(response)} with confidence {confidence_level}/5"
    logger.info(message)
    return AnswerOutcome(ok=True, node_name=node_name, message=message)
