# logic package
from .tree import (
    NodeSpec,
    NodeState,
    AndOrTree,
    build_tree
)
from .propagate import calculate_tree
from .influence import (
    assign_indices,
    calculate_influence,
    update_tree
)
from .answers import AnswerOutcome, set_answer
from .sensitivity import get_confidence_boosters
from .queries import (
    get_questions,
    get_highest_influence,
    get_next_questions
)

__all__ = [
    'NodeSpec',
    'NodeState',
    'AndOrTree',
    'build_tree',
    'calculate_tree',
    'assign_indices',
    'calculate_influence',
    'update_tree',
    'AnswerOutcome',
    'set_answer',
    'get_confidence_boosters',
    'get_questions',
    'get_highest_influence',
    'get_next_questions'
]
