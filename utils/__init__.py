# utils package
from .constants import (
    APP_VERSION, RULE_AND, RULE_OR, VALID_RULES, SORT_TRUE, SORT_FALSE, SORT_BOTH,
    ACTION_ANSWER_NEW, ACTION_INCREASE_CONFIDENCE
)
from .helpers import (
    normalize_text, optional_text, normalize_rule, normalize_id,
    is_valid_level, level_to_confidence, confidence_to_level
)

__all__ = [
    'APP_VERSION', 'RULE_AND', 'RULE_OR', 'VALID_RULES', 'SORT_TRUE', 'SORT_FALSE', 'SORT_BOTH',
    'ACTION_ANSWER_NEW', 'ACTION_INCREASE_CONFIDENCE',
    'normalize_text', 'optional_text', 'normalize_rule', 'normalize_id',
    'is_valid_level', 'level_to_confidence', 'confidence_to_level'
]
