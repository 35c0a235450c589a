#!/usr/bin/env python3
"""
Generate a synthetic AND-OR decision tree for performance testing.
Writes a relational CSV (id, name, question, rule, parent).
"""

import pandas as pd
import random
from typing import List, Dict
import os
import sys

# Add parent directory to path to import utils
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.constants import RELATIONAL_COLUMNS, RULE_AND, RULE_OR

TOPICS = [
    "Revenue", "Margin", "Debt", "Liquidity", "Emissions", "Waste", "Water",
    "Suppliers", "Staff", "Safety", "Community", "Board", "Audit", "Disclosure",
]


def generate_rows(depth: int, branching: int, rng: random.Random) -> List[Dict]:
    """Build rows breadth-first; internal nodes alternate AND/OR with a random start."""
    rows = [{"id": 0, "name": "Root", "question": None,
             "rule": rng.choice([RULE_AND, RULE_OR]), "parent": None}]
    frontier = [(0, 0)]
    next_id = 1
    leaf_no = 1

    while frontier:
        parent_id, level = frontier.pop(0)
        n_children = rng.randint(2, branching)
        for _ in range(n_children):
            is_leaf = level + 1 >= depth or rng.random() < 0.3
            if is_leaf:
                topic = rng.choice(TOPICS)
                rows.append({
                    "id": next_id,
                    "name": f"Q{leaf_no}",
                    "question": f"Is the {topic.lower()} criterion {leaf_no} satisfied?",
                    "rule": None,
                    "parent": parent_id,
                })
                leaf_no += 1
            else:
                rows.append({
                    "id": next_id,
                    "name": f"N{next_id}",
                    "question": None,
                    "rule": rng.choice([RULE_AND, RULE_OR]),
                    "parent": parent_id,
                })
                frontier.append((next_id, level + 1))
            next_id += 1
    return rows


def main():
    """Generate and save synthetic tree data."""
    depth = int(sys.argv[1]) if len(sys.argv) > 1 else 4
    branching = int(sys.argv[2]) if len(sys.argv) > 2 else 5
    seed = int(sys.argv[3]) if len(sys.argv) > 3 else 42

    print(f"🌳 Generating synthetic tree (depth={depth}, branching<={branching}, seed={seed})...")
    rows = generate_rows(depth, branching, random.Random(seed))
    df = pd.DataFrame(rows, columns=RELATIONAL_COLUMNS)
    df["parent"] = df["parent"].astype("Int64")

    output_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "synthetic_tree.csv")
    df.to_csv(output_path, index=False)

    n_leaves = int(df["rule"].isna().sum())
    print(f"✅ Saved {len(df):,} nodes ({n_leaves:,} leaves) to: {output_path}")


if __name__ == "__main__":
    main()
