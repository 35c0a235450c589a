# logic/tree.py
"""
In-memory AND-OR tree structure.
No I/O - loaders in io_utils build trees through build_tree().

STRUCTURE vs STATE:
A tree is an arena of immutable NodeSpec records keyed by integer id (assigned in
insertion order), plus a map id -> NodeState holding the answer, confidence and
the transient indices. The structure never changes after construction. Only
set_answer() replaces leaf states and only update_tree() replaces derived states,
so a what-if copy of the tree only needs a copy of the state map.
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Any

from utils.helpers import optional_text


@dataclass(frozen=True)
class NodeSpec:
    """Immutable description of one node."""
    id: int
    name: str
    rule: Optional[str] = None
    question: Optional[str] = None
    parent: Optional[int] = None
    children: Tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class NodeState:
    """Answer, confidence and derived scores of one node. None means unknown/unset."""
    answer: Optional[bool] = None
    confidence: Optional[float] = None
    true_index: Optional[float] = None
    false_index: Optional[float] = None
    influence_if_true: Optional[float] = None
    influence_if_false: Optional[float] = None
    influence_index: Optional[float] = None

    @property
    def is_resolved(self) -> bool:
        return self.answer is not None


UNKNOWN_STATE = NodeState()

State = Dict[int, NodeState]


class AndOrTree:
    """Arena of nodes with a single root and a replaceable state map."""

    def __init__(self, nodes: Mapping[int, NodeSpec], root_id: int, state: Optional[State] = None):
        self._nodes = MappingProxyType(dict(nodes))
        self.root_id = root_id
        self._by_name = {spec.name: node_id for node_id, spec in self._nodes.items()}
        if state is None:
            state = {node_id: UNKNOWN_STATE for node_id in self._nodes}
        self._state: State = dict(state)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"AndOrTree(root={self.root.name!r}, nodes={len(self)}, leaves={len(self.leaf_ids())})"

    # -- structure ---------------------------------------------------------

    @property
    def nodes(self) -> Mapping[int, NodeSpec]:
        return self._nodes

    @property
    def root(self) -> NodeSpec:
        return self._nodes[self.root_id]

    def spec(self, node_id: int) -> NodeSpec:
        return self._nodes[node_id]

    def find(self, name: str) -> Optional[NodeSpec]:
        """Look up a node by name; None if absent."""
        node_id = self._by_name.get(name)
        return None if node_id is None else self._nodes[node_id]

    def iter_pre_order(self, start: Optional[int] = None) -> Iterator[int]:
        stack = [self.root_id if start is None else start]
        while stack:
            node_id = stack.pop()
            yield node_id
            stack.extend(reversed(self._nodes[node_id].children))

    def iter_post_order(self, start: Optional[int] = None) -> Iterator[int]:
        """Children before parents, siblings in declared order."""
        stack: List[Tuple[int, bool]] = [(self.root_id if start is None else start, False)]
        while stack:
            node_id, expanded = stack.pop()
            if expanded:
                yield node_id
                continue
            stack.append((node_id, True))
            for child in reversed(self._nodes[node_id].children):
                stack.append((child, False))

    def ancestors(self, node_id: int) -> List[int]:
        """Ancestor ids from the immediate parent up to the root."""
        chain = []
        parent = self._nodes[node_id].parent
        while parent is not None:
            chain.append(parent)
            parent = self._nodes[parent].parent
        return chain

    def leaf_ids(self) -> List[int]:
        return [node_id for node_id in self.iter_pre_order() if self._nodes[node_id].is_leaf]

    def internal_ids(self) -> List[int]:
        return [node_id for node_id in self.iter_pre_order() if not self._nodes[node_id].is_leaf]

    # -- state -------------------------------------------------------------

    @property
    def states(self) -> Mapping[int, NodeState]:
        """Read-only view of the current state map."""
        return MappingProxyType(self._state)

    def state(self, name: str) -> NodeState:
        """State of the named node; KeyError if the name is unknown."""
        return self._state[self._by_name[name]]

    @property
    def root_state(self) -> NodeState:
        return self._state[self.root_id]

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Plain-dict copy of every node's state keyed by name (for comparisons and reports)."""
        return {
            self._nodes[node_id].name: asdict(self._state[node_id])
            for node_id in self.iter_pre_order()
        }

    def copy_state(self) -> State:
        return dict(self._state)

    def clone(self) -> "AndOrTree":
        """Independent tree sharing the immutable structure."""
        return AndOrTree(self._nodes, self.root_id, self._state)

    def _commit(self, state: State) -> None:
        # Only set_answer and update_tree call this.
        self._state = dict(state)


def build_tree(nodes: Iterable[Mapping[str, Any]], edges: Iterable[Tuple[str, str]]) -> AndOrTree:
    """
    Build a tree from node records and (parent_name, child_name) edges.

    Args:
        nodes: Ordered records with 'name' and optional 'rule' / 'question'
        edges: Ordered parent -> child pairs; child order follows edge order

    Returns:
        AndOrTree with every state unknown. The root is the first node that
        never appears as a child.
    """
    ids: Dict[str, int] = {}
    records: List[Dict[str, Any]] = []
    for record in nodes:
        name = optional_text(record.get("name"))
        if name is None:
            raise ValueError("Every node needs a name")
        if name in ids:
            raise ValueError(f"Duplicate node name '{name}'")
        ids[name] = len(records)
        records.append({
            "name": name,
            "rule": optional_text(record.get("rule")),
            "question": optional_text(record.get("question")),
            "parent": None,
            "children": [],
        })

    if not records:
        raise ValueError("Cannot build a tree without nodes")

    for parent_name, child_name in edges:
        parent_id = ids[parent_name]
        child_id = ids[child_name]
        records[child_id]["parent"] = parent_id
        records[parent_id]["children"].append(child_id)

    arena = {
        node_id: NodeSpec(
            id=node_id,
            name=rec["name"],
            rule=rec["rule"],
            question=rec["question"],
            parent=rec["parent"],
            children=tuple(rec["children"]),
        )
        for node_id, rec in enumerate(records)
    }
    root_id = next((node_id for node_id, spec in arena.items() if spec.parent is None), None)
    if root_id is None:
        raise ValueError("No root node: every node has a parent")
    return AndOrTree(arena, root_id)
