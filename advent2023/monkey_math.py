"""Monkey Math: evaluate a tree of yelling monkeys and solve for the human's number."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

ROOT_MONKEY_NAME = "root"

Operation = Callable[[int, int], int]


def _div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


# operator -> (forward, solve when left unknown, solve when right unknown)
# The solvers take (known operand, result).
_OPERATIONS: dict[str, tuple[Operation, Operation, Operation]] = {
    "+": (lambda a, b: a + b, lambda a, b: b - a, lambda a, b: b - a),
    "-": (lambda a, b: a - b, lambda a, b: b + a, lambda a, b: a - b),
    "*": (lambda a, b: a * b, lambda a, b: _div(b, a), lambda a, b: _div(b, a)),
    "/": (_div, lambda a, b: b * a, lambda a, b: _div(a, b)),
}


@dataclass
class TreeNode:
    """A monkey: either a leaf with a value or an operation on two other monkeys."""

    name: str
    leaf: bool = False
    value: int = 0
    poisoned: bool = False
    operation: str | None = None
    left: str = ""
    left_poisoned: bool = False
    left_value: int = 0
    right: str = ""
    right_poisoned: bool = False
    right_value: int = 0


def leaf_node(name: str, value: int) -> TreeNode:
    """A monkey that yells a fixed number."""
    return TreeNode(name=name, leaf=True, value=value)


def parent_node(name: str, operation: str) -> TreeNode:
    """A monkey that combines two others with operation."""
    if operation not in _OPERATIONS:
        raise ValueError(f"invalid operation {operation!r}")
    return TreeNode(name=name, operation=operation)


def node_solve(node: TreeNode, known: int, result: int) -> int:
    """The unknown operand of node given its other operand and its result."""
    _, solve_left, solve_right = _OPERATIONS[node.operation]
    if node.left_poisoned:
        return solve_left(known, result)
    return solve_right(known, result)


class Tree:
    """All monkeys, looked up by name."""

    def __init__(self, lookup: dict[str, TreeNode]) -> None:
        self.lookup = lookup

    def find_node(self, name: str) -> TreeNode:
        """The monkey with the given name."""
        try:
            return self.lookup[name]
        except KeyError:
            raise KeyError(f"unknown monkey {name!r}") from None

    def evaluate(self, name: str) -> int:
        """The number the monkey yells; -1 when it depends on the poisoned monkey."""
        node = self.find_node(name)
        if node.leaf:
            return node.value

        node.left_value = self.evaluate(node.left)
        node.right_value = self.evaluate(node.right)

        if node.left_poisoned or node.right_poisoned:
            return -1

        forward, _, _ = _OPERATIONS[node.operation]
        return forward(node.left_value, node.right_value)

    def solve(self, name: str, result: int) -> int:
        """Follow the poisoned path down, inverting each operation, to the unknown."""
        node = self.find_node(name)

        if name == ROOT_MONKEY_NAME:
            if node.left_poisoned:
                result = node.right_value
                node = self.find_node(node.left)
            else:
                result = node.left_value
                node = self.find_node(node.right)

        if node.poisoned:
            return result

        if node.left_poisoned:
            return self.solve(node.left, node_solve(node, node.right_value, result))
        return self.solve(node.right, node_solve(node, node.left_value, result))

    def promote_poison(self, name: str) -> bool:
        """Flag every operand that depends on the poisoned monkey."""
        node = self.find_node(name)
        if node.leaf:
            return node.poisoned

        if self.promote_poison(node.left):
            node.left_poisoned = True
        if self.promote_poison(node.right):
            node.right_poisoned = True
        return node.left_poisoned or node.right_poisoned


def _parse_node(line: str, poison_name: str | None) -> TreeNode:
    tokens = line.split()
    if len(tokens) == 4:
        name, left, operation, right = tokens
        node = parent_node(name.removesuffix(":"), operation[0])
        node.left = left
        node.right = right
        return node

    if len(tokens) == 2:
        name = tokens[0].removesuffix(":")
        try:
            number = int(tokens[1])
        except ValueError:
            raise ValueError(f"invalid monkey line: {line!r}") from None
        node = leaf_node(name, number)
        if name == poison_name:
            node.poisoned = True
            node.value = -1
        return node

    raise ValueError(f"invalid monkey line: {line!r}")


def create_tree(poison_name: str | None, text: str) -> Tree:
    """Parse the monkeys, marking poison_name as the unknown one."""
    lookup: dict[str, TreeNode] = {}
    for line in text.split("\n"):
        node = _parse_node(line, poison_name)
        lookup[node.name] = node

    root = lookup.get(ROOT_MONKEY_NAME)
    if root is None:
        raise ValueError("missing root monkey")

    tree = Tree(lookup)
    tree.promote_poison(ROOT_MONKEY_NAME)

    if root.left_poisoned and root.right_poisoned:
        raise ValueError("both sides of the root tree are poisoned")
    return tree


def evaluate_root(text: str) -> int:
    """The number the root monkey yells."""
    return create_tree(None, text).evaluate(ROOT_MONKEY_NAME)


def answers(text: str) -> tuple[int, int]:
    """Root's number, and the number the human must yell for root's equality test."""
    text = text.strip()
    yelled = evaluate_root(text)

    tree = create_tree("humn", text)
    tree.evaluate(ROOT_MONKEY_NAME)
    return yelled, tree.solve(ROOT_MONKEY_NAME, 0)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Monkey Math")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    yelled, needed = answers(Path(args.input).read_text())
    print(f"Root will yell: {yelled}")
    print(f"You should yell: {needed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())