import string

import pytest

from algokit.graphs import (
    GraphNode,
    clone_graph,
    find_judge,
    graph_from_adjacency,
    graph_to_adjacency,
    is_alien_sorted,
)

SQUARE = [[2, 4], [1, 3], [2, 4], [1, 3]]


def _all_nodes(node):
    seen = {id(node): node}
    stack = [node]
    while stack:
        for nbr in stack.pop().neighbors:
            if id(nbr) not in seen:
                seen[id(nbr)] = nbr
                stack.append(nbr)
    return list(seen.values())


def test_adjacency_round_trip():
    assert graph_to_adjacency(graph_from_adjacency(SQUARE)) == SQUARE


def test_empty_adjacency():
    assert graph_from_adjacency([]) is None
    assert graph_to_adjacency(None) == []


def test_adjacency_rejects_unknown_neighbour():
    with pytest.raises(ValueError):
        graph_from_adjacency([[2], [3]])


def test_clone_preserves_structure():
    original = graph_from_adjacency(SQUARE)
    copy = clone_graph(original)
    assert graph_to_adjacency(copy) == SQUARE


def test_clone_shares_no_nodes():
    original = graph_from_adjacency(SQUARE)
    copy = clone_graph(original)
    original_ids = {id(n) for n in _all_nodes(original)}
    copy_ids = {id(n) for n in _all_nodes(copy)}
    assert original_ids.isdisjoint(copy_ids)
    assert len(copy_ids) == len(original_ids)


def test_clone_of_none():
    assert clone_graph(None) is None


def test_clone_self_loop():
    node = GraphNode(7)
    node.neighbors.append(node)
    copy = clone_graph(node)
    assert copy.val == node.val
    assert copy.neighbors[0] is copy
    assert copy is not node


def test_alien_sorted_with_plain_alphabet_matches_sorted():
    words = ["apple", "app", "banana", "band", "can"]
    alphabet = string.ascii_lowercase
    assert is_alien_sorted(sorted(words), alphabet) is True
    assert is_alien_sorted(words, alphabet) is (sorted(words) == words)


def test_alien_sorted_with_reversed_alphabet():
    words = ["cat", "bat", "ant"]
    reversed_alphabet = string.ascii_lowercase[::-1]
    assert is_alien_sorted(words, reversed_alphabet) is True
    assert is_alien_sorted(words[::-1], reversed_alphabet) is False


def test_alien_sorted_longer_word_before_its_prefix():
    assert is_alien_sorted(["apple", "app"], string.ascii_lowercase) is False


def test_alien_sorted_equal_words():
    assert is_alien_sorted(["same", "same"], string.ascii_lowercase) is True


def test_alien_sorted_unknown_letter():
    with pytest.raises(ValueError):
        is_alien_sorted(["ab", "c"], "ab")


def test_judge_single_person():
    assert find_judge(1, []) == 1


def test_judge_trusted_by_other():
    assert find_judge(2, [[1, 2]]) == 2


def test_judge_cycle_has_no_judge():
    assert find_judge(3, [[1, 2], [2, 3], [3, 1]]) == -1


def test_judge_who_trusts_is_disqualified():
    assert find_judge(3, [[1, 3], [2, 3], [3, 1]]) == -1