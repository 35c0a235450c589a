#!/usr/bin/env python3
"""
Performance harness for the analysis functions on a synthetic tree.
Times update_tree, get_highest_influence and get_confidence_boosters.
"""

import logging
import random
import time
import os
import sys
from typing import Dict, Any

# Add parent directory to path to import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from io_utils.loaders import load_tree_csv
from logic import update_tree, set_answer, get_highest_influence, get_confidence_boosters
from utils import APP_VERSION


def load_synthetic_tree(filename: str = "synthetic_tree.csv"):
    """Load the synthetic tree file."""
    file_path = os.path.join(os.path.dirname(__file__), "..", filename)

    if not os.path.exists(file_path):
        print(f"❌ Synthetic tree file not found: {file_path}")
        print("Please run scripts/gen_synth.py first to generate the data.")
        sys.exit(1)

    print(f"📁 Loading synthetic tree from: {file_path}")
    tree = load_tree_csv(file_path)
    print(f"✅ Loaded {len(tree):,} nodes, {len(tree.leaf_ids()):,} leaves")
    return tree


def time_function(func, *args, **kwargs) -> Dict[str, Any]:
    """Time a function execution and return results."""
    print(f"⏱️  Timing {func.__name__}...")

    # Warm up run (discard)
    start_warm = time.time()
    _ = func(*args, **kwargs)
    warm_time = time.time() - start_warm

    # Actual timed run
    start = time.time()
    result = func(*args, **kwargs)
    execution_time = time.time() - start

    return {
        "function": func.__name__,
        "execution_time": execution_time,
        "warm_up_time": warm_time,
        "result_size": len(result) if hasattr(result, '__len__') else "N/A",
        "result_type": type(result).__name__
    }


def answer_until_resolved(tree, seed: int = 7) -> int:
    """Answer the top-ranked question with random evidence until the root resolves."""
    rng = random.Random(seed)
    answered = 0
    while tree.root_state.answer is None:
        ranking = get_highest_influence(tree, top_n=1)
        if ranking.empty:
            break
        set_answer(tree, ranking.loc[0, "name"], rng.random() < 0.5, rng.randint(1, 4))
        update_tree(tree)
        answered += 1
    return answered


def main():
    logging.basicConfig(level=logging.WARNING)

    print(f"🚀 AND-OR TREE PERFORMANCE HARNESS ({APP_VERSION})")
    print("=" * 60)

    tree = load_synthetic_tree()
    results = [time_function(update_tree, tree)]
    results.append(time_function(get_highest_influence, tree, 10))

    answered = answer_until_resolved(tree)
    print(f"📝 Root resolved after {answered} answers: "
          f"{tree.root_state.answer} ({tree.root_state.confidence})")
    results.append(time_function(get_confidence_boosters, tree, 10))

    print("\n" + "=" * 60)
    print("📈 SUMMARY")
    print("=" * 60)
    for r in results:
        print(f"{r['function']:<28} {r['execution_time']:.4f}s "
              f"(warm-up {r['warm_up_time']:.4f}s, {r['result_type']} of {r['result_size']})")


if __name__ == "__main__":
    main()
