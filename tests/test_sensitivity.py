import pytest

from logic import get_confidence_boosters, set_answer, update_tree
from logic.sensitivity import simulate_root_confidence
from utils.constants import BOOSTER_COLUMNS

from conftest import make_tree, leaf


def _answered(spec, answers):
    tree = make_tree(spec)
    for name, response, level in answers:
        set_answer(tree, name, response, level)
    return update_tree(tree)


class TestSimulateRootConfidence:
    """Test single-leaf what-if simulation."""

    def test_does_not_modify_tree(self):
        tree = _answered(("Root", "AND", [leaf("L1"), leaf("L2")]), [("L1", True, 3), ("L2", True, 4)])
        before = tree.snapshot()
        simulated = simulate_root_confidence(tree, tree.find("L1").id)
        assert simulated == pytest.approx(0.9)
        assert tree.snapshot() == before

    def test_unresolved_root(self, or_of_and_tree):
        tree = or_of_and_tree
        assert simulate_root_confidence(tree, tree.find("b1").id, answer=True) is None


class TestGetConfidenceBoosters:
    """Test confidence booster ranking."""

    def test_none_before_conclusion(self, ethical_tree):
        assert get_confidence_boosters(ethical_tree) is None

    def test_increase_confidence_ranked_by_gain(self):
        tree = _answered(("Root", "AND", [leaf("L1"), leaf("L2")]), [("L1", True, 3), ("L2", True, 4)])
        assert tree.root_state.confidence == pytest.approx(0.72)

        df = get_confidence_boosters(tree)
        assert list(df.columns) == BOOSTER_COLUMNS
        assert list(df["name"]) == ["L1", "L2"]
        assert list(df["action"]) == ["Increase Confidence", "Increase Confidence"]
        assert df.loc[0, "detail"] == "Current conf: 3.0/5"
        assert list(df["potential_gain"]) == pytest.approx([0.18, 0.08])

    def test_equal_gains_sorted_by_name(self):
        tree = _answered(("Root", "OR", [leaf("L1"), leaf("L2"), leaf("L3")]), [("L1", True, 1)])
        assert tree.root_state.confidence == pytest.approx(0.6)

        df = get_confidence_boosters(tree)
        assert list(df["name"]) == ["L1", "L2", "L3"]
        assert list(df["action"]) == ["Increase Confidence", "Answer New Question", "Answer New Question"]
        assert list(df["detail"][1:]) == ["Suggest answering TRUE", "Suggest answering TRUE"]
        assert list(df["potential_gain"]) == pytest.approx([0.4, 0.4, 0.4])

    def test_only_positive_gains(self):
        """With an AND root already FALSE, answering the other leaf cannot help."""
        tree = _answered(("Root", "AND", [leaf("L1"), leaf("L2")]), [("L1", False, 2)])
        assert tree.root_state.answer is False

        df = get_confidence_boosters(tree)
        assert list(df["name"]) == ["L1"]
        assert df.loc[0, "potential_gain"] == pytest.approx(0.3)

    def test_top_n(self):
        tree = _answered(("Root", "OR", [leaf("L1"), leaf("L2"), leaf("L3")]), [("L1", True, 1)])
        df = get_confidence_boosters(tree, top_n=2)
        assert list(df["name"]) == ["L1", "L2"]

    def test_empty_when_fully_confident(self):
        tree = _answered(("Root", "OR", [leaf("L1"), leaf("L2")]), [("L1", True, 5)])
        df = get_confidence_boosters(tree)
        assert df is not None
        assert df.empty
        assert list(df.columns) == BOOSTER_COLUMNS
