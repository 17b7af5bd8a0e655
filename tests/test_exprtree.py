from irlab.exprtree import ExpressionTree, Kind, Node


def _sample():
    a = Node(Kind.NUMBER, value=1.0, level=1)
    b = Node(Kind.NUMBER, value=2.0, level=1)
    root = Node(Kind.ACTION, action="+", level=0, left=a, right=b)
    return root, a, b


def test_children_order():
    root, a, b = _sample()
    assert root.children() == [a, b]


def test_children_skip_missing():
    arg = Node(Kind.NUMBER, value=4.0)
    func = Node(Kind.FUNCTION, name="sin", left=arg)
    assert func.children() == [arg]
    assert arg.children() == []


def test_label_number():
    assert Node(Kind.NUMBER, value=3.0).label() == "3"
    assert Node(Kind.NUMBER, value=0.5).label() == "0.5"


def test_label_function_and_action():
    assert Node(Kind.FUNCTION, name="sqrt").label() == "sqrt"
    assert Node(Kind.ACTION, action="*").label() == "*"


def test_shift_level_whole_subtree():
    root, a, b = _sample()
    root.shift_level(2)
    assert [n.level for n in (root, a, b)] == [2, 3, 3]
    root.shift_level(-2)
    assert [n.level for n in (root, a, b)] == [0, 1, 1]


def test_shift_level_returns_node():
    root, _, _ = _sample()
    assert root.shift_level(1) is root


def test_nodes_preorder():
    root, a, b = _sample()
    tree = ExpressionTree(root)
    assert list(tree.nodes()) == [root, a, b]
    assert tree.size == 3


def test_empty_tree():
    tree = ExpressionTree()
    assert list(tree.nodes()) == []
    assert tree.size == 0