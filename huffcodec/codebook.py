from huffcodec.abc import CodebookType
from huffcodec.tree import Internal, Leaf, Tree


def assign_codes(tree: Tree) -> CodebookType:
    """Walk the tree depth-first, left before right, and record root-to-leaf paths.

    A left edge contributes '0' and a right edge '1'. A tree that is a single
    leaf gets the code "0" so every symbol costs at least one bit.
    """
    codes: CodebookType = {}

    if isinstance(tree, Leaf):
        codes[tree.symbol] = "0"
        return codes

    def walk(node: Tree, prefix: str) -> None:
        match node:
            case Leaf(symbol=s):
                codes[s] = prefix
            case Internal(left=left, right=right):
                walk(left, prefix + "0")
                walk(right, prefix + "1")
            case _:
                raise TypeError(f"Not a tree node: {node!r}")

    walk(tree, "")
    return codes


def is_prefix_free(codes: CodebookType) -> bool:
    # After sorting, a prefix always lands right before some word it prefixes
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return "" not in codes.values()
