# utils/constants.py

APP_VERSION = "v1.2.0"

# Logical rules for internal nodes (leaves carry no rule)
RULE_AND = "AND"
RULE_OR = "OR"
VALID_RULES = (RULE_AND, RULE_OR)

# Leaf confidence levels as entered by the user, mapped to 0.5 + level / 10
MIN_CONFIDENCE_LEVEL = 0
MAX_CONFIDENCE_LEVEL = 5
BASE_CONFIDENCE = 0.5
CONFIDENCE_STEP = 0.1
MAX_CONFIDENCE = 1.0

# Ranking options for get_highest_influence
SORT_TRUE = "TRUE"
SORT_FALSE = "FALSE"
SORT_BOTH = "BOTH"
SORT_COLUMNS = {
    SORT_TRUE: "influence_if_true",
    SORT_FALSE: "influence_if_false",
    SORT_BOTH: "influence_index",
}
DEFAULT_TOP_N = 5
NEXT_QUESTIONS_TOP_N = 10

# Confidence booster actions
ACTION_ANSWER_NEW = "Answer New Question"
ACTION_INCREASE_CONFIDENCE = "Increase Confidence"

# Next-step modes
MODE_INFLUENCE = "influence"
MODE_BOOSTERS = "boosters"
MODE_FINISHED = "finished"

# Output schemas
INFLUENCE_COLUMNS = ["name", "question", "influence_if_true", "influence_if_false", "influence_index"]
QUESTION_COLUMNS = ["name", "question", "answer", "confidence",
                    "influence_if_true", "influence_if_false", "influence_index"]
BOOSTER_COLUMNS = ["name", "question", "action", "detail", "potential_gain"]

# Input schemas
RELATIONAL_COLUMNS = ["id", "name", "question", "rule", "parent"]
PATH_COLUMN = "path"
PATH_DELIMITER = "/"
CHILDREN_KEY = "nodes"
UNNAMED_NODE = "Unnamed Node"

# Plain-text rendering column starts
RENDER_COLUMNS = {"Tree": 0, "Rule": 50, "Answer": 60, "Confidence": 72}
