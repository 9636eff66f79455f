import pytest

from advent2023.monkey_math import (
    ROOT_MONKEY_NAME,
    TreeNode,
    answers,
    create_tree,
    evaluate_root,
    leaf_node,
    node_solve,
    parent_node,
)

SOURCE = """root: pppw + sjmn
dbpl: 5
cczh: sllz + lgvd
zczc: 2
ptdq: humn - dvpt
dvpt: 3
lfqf: 4
humn: 5
ljgn: 2
sjmn: drzm * dbpl
sllz: 4
pppw: cczh / lfqf
lgvd: ljgn * ptdq
drzm: hmdt - zczc
hmdt: 32"""


def test_evaluate_root():
    assert evaluate_root(SOURCE) == 152


def test_create_tree_marks_poison():
    tree = create_tree("humn", SOURCE)
    assert tree.find_node("humn").poisoned is True
    root = tree.find_node(ROOT_MONKEY_NAME)
    assert root.left_poisoned != root.right_poisoned


def test_evaluate():
    tree = create_tree("humn", SOURCE)
    tree.evaluate(ROOT_MONKEY_NAME)
    root = tree.find_node(ROOT_MONKEY_NAME)
    known = root.right_value if root.left_poisoned else root.left_value
    assert known == 150


def test_solve():
    tree = create_tree("humn", SOURCE)
    tree.evaluate(ROOT_MONKEY_NAME)
    assert tree.solve(ROOT_MONKEY_NAME, 0) == 301


def test_answers():
    assert answers(SOURCE + "\n") == (152, 301)


@pytest.mark.parametrize("name", ["root", "argb"])
def test_leaf_node(name):
    assert leaf_node(name, 100) == TreeNode(name=name, value=100, leaf=True)


@pytest.mark.parametrize("name", ["root", "argb"])
def test_parent_node(name):
    node = parent_node(name, "+")
    assert node.name == name
    assert node.value == 0
    assert node.leaf is False


def test_parent_node_invalid_operation():
    with pytest.raises(ValueError):
        parent_node("test", "%")


@pytest.mark.parametrize(
    "known, result, left, op, expected",
    [
        (5, 100, True, "+", 95),
        (5, 100, True, "-", 105),
        (5, 100, True, "/", 500),
        (5, 100, True, "*", 20),
        (5, 100, False, "+", 95),
        (500, 100, False, "-", 400),
        (20, 5, False, "/", 4),
        (5, 100, False, "*", 20),
    ],
)
def test_node_solve(known, result, left, op, expected):
    node = parent_node("test", op)
    if left:
        node.left_poisoned = True
    else:
        node.right_poisoned = True
    assert node_solve(node, known, result) == expected


def test_missing_root_raises():
    with pytest.raises(ValueError):
        create_tree("humn", "abcd: 4\nhumn: 5")


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        create_tree("humn", "root: a + b + c")


def test_both_sides_poisoned_raises():
    with pytest.raises(ValueError):
        create_tree("humn", "root: humn + humn\nhumn: 5")


def test_division_truncates_towards_zero():
    assert evaluate_root("root: a / b\na: -7\nb: 2") == -3