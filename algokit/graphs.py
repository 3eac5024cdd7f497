"""Graph cloning, alien-alphabet ordering and the town judge."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence


@dataclass(eq=False, repr=False)
class GraphNode:
    """A vertex of an undirected graph holding a value and its neighbours."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"GraphNode(val={self.val}, neighbors={[n.val for n in self.neighbors]})"


def graph_from_adjacency(adjacency: Sequence[Sequence[int]]) -> Optional[GraphNode]:
    """Build a graph whose node ``i + 1`` has the neighbours listed at ``adjacency[i]``.

    Returns node 1, or None for an empty list.
    """
    nodes = [GraphNode(i + 1) for i in range(len(adjacency))]
    for node, neighbours in zip(nodes, adjacency):
        for value in neighbours:
            if not 1 <= value <= len(nodes):
                raise ValueError(f"neighbour {value} is not a node of the graph")
            node.neighbors.append(nodes[value - 1])
    return nodes[0] if nodes else None


def _collect(node: GraphNode) -> list[GraphNode]:
    seen = {id(node): node}
    queue = deque([node])
    while queue:
        for neighbour in queue.popleft().neighbors:
            if id(neighbour) not in seen:
                seen[id(neighbour)] = neighbour
                queue.append(neighbour)
    return list(seen.values())


def graph_to_adjacency(node: Optional[GraphNode]) -> list[list[int]]:
    """Return the neighbour values of every node reachable from ``node``, ordered by value."""
    if node is None:
        return []
    nodes = sorted(_collect(node), key=lambda n: n.val)
    return [[n.val for n in each.neighbors] for each in nodes]


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies = {id(node): GraphNode(node.val)}
    stack = [node]
    while stack:
        original = stack.pop()
        copy = copies[id(original)]
        for neighbour in original.neighbors:
            if id(neighbour) not in copies:
                copies[id(neighbour)] = GraphNode(neighbour.val)
                stack.append(neighbour)
            copy.neighbors.append(copies[id(neighbour)])
    return copies[id(node)]


def is_alien_sorted(words: Iterable[str], order: str) -> bool:
    """Tell whether ``words`` are sorted under the alphabet ``order``.

    A word sorts after any of its prefixes.
    """
    rank = {letter: i for i, letter in enumerate(order)}

    def key(word: str) -> list[int]:
        try:
            return [rank[letter] for letter in word]
        except KeyError as exc:
            raise ValueError(f"letter {exc.args[0]!r} is not in the alphabet") from None

    keys = [key(w) for w in words]
    return all(a <= b for a, b in zip(keys, keys[1:]))


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """Return the person in 1..``n`` trusted by all others and trusting nobody, or -1."""
    delta = [0] * (n + 1)
    for truster, trusted in trust:
        delta[truster] -= 1
        delta[trusted] += 1
    return next((person for person in range(1, n + 1) if delta[person] == n - 1), -1)