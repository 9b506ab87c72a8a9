import pytest  # noqa

from huffcodec.codebook import assign_codes, is_prefix_free
from huffcodec.errors import EmptyInput
from huffcodec.frequency import count_frequencies
from huffcodec.tree import Internal, Leaf, Tree, build_tree


def count_leaves(tree: Tree) -> int:
    match tree:
        case Leaf():
            return 1
        case Internal(left=left, right=right):
            return count_leaves(left) + count_leaves(right)
    raise TypeError(f"Not a tree node: {tree!r}")


def test_count_frequencies():
    freqs = count_frequencies(b"AABBCCCC")
    assert freqs == {65: 2, 66: 2, 67: 4}
    assert list(freqs) == [65, 66, 67]


def test_count_frequencies_high_bytes():
    freqs = count_frequencies(bytes([0xff, 0x80, 0xff]))
    assert freqs == {0x80: 1, 0xff: 2}


def test_count_frequencies_accepts_bytearray():
    assert count_frequencies(bytearray(b"aab")) == {97: 2, 98: 1}


def test_count_frequencies_empty():
    with pytest.raises(EmptyInput):
        count_frequencies(b"")


def test_build_tree_empty():
    with pytest.raises(EmptyInput):
        build_tree({})


def test_build_tree_single_leaf():
    assert build_tree({7: 3}) == Leaf(symbol=7, freq=3)


def test_build_tree_aabbcccc():
    tree = build_tree({65: 2, 66: 2, 67: 4})
    assert tree == Internal(
        left=Leaf(symbol=67, freq=4),
        right=Internal(left=Leaf(symbol=65, freq=2), right=Leaf(symbol=66, freq=2), freq=4),  # noqa
        freq=8,
    )


def test_build_tree_ties_are_fifo():
    # All equal: leaves merge in symbol order, then merged trees in creation order
    tree = build_tree({1: 1, 2: 1, 3: 1, 4: 1})
    assert assign_codes(tree) == {1: "00", 2: "01", 3: "10", 4: "11"}


@pytest.mark.parametrize("n", [1, 2, 3, 17, 256])
def test_leaf_count_and_frequency(n: int):
    freqs = {s: s + 1 for s in range(n)}
    tree = build_tree(freqs)
    assert count_leaves(tree) == n
    assert tree.freq == sum(freqs.values())


def test_internal_frequency_is_sum():
    def check(node):
        if isinstance(node, Internal):
            assert node.freq == node.left.freq + node.right.freq
            check(node.left)
            check(node.right)

    check(build_tree(count_frequencies(b"abracadabra alakazam")))


def test_assign_codes_single_leaf():
    assert assign_codes(Leaf(symbol=200, freq=9)) == {200: "0"}


def test_is_prefix_free():
    assert is_prefix_free({1: "0", 2: "10", 3: "11"})
    assert not is_prefix_free({1: "0", 2: "01"})
    assert not is_prefix_free({1: ""})


@pytest.mark.parametrize("bad", [3, "AABB", None])
def test_count_frequencies_rejects_non_buffers(bad):
    with pytest.raises(TypeError):
        count_frequencies(bad)
