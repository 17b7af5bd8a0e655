import pytest

from irlab.exprir import IRModule, generate_ir
from irlab.exprparser import parse_expression
from irlab.exprtree import ExpressionTree, Kind, Node

HEADER = "; ModuleID = 'top'\nsource_filename = \"top\"\n"


def test_module_header_and_function():
    text = generate_ir(parse_expression("1+2")).render()
    assert text.startswith(HEADER)
    assert "define void @main() {\nentry:\n" in text
    assert text.endswith("}\n")


def test_constant_addition_folded():
    module = generate_ir(parse_expression("1+2"))
    assert module.body == ["ret double 3.000000e+00"]
    assert module.declarations == []


def test_function_call_declared():
    module = generate_ir(parse_expression("sin(1)"))
    assert module.body[0] == "%0 = call double @sin(double 1.000000e+00)"
    assert module.body[-1] == "ret double %0"
    assert module.declarations == ["declare double @sin(double)"]


def test_declaration_once_per_function():
    text = generate_ir(parse_expression("sin(1)+sin(2)")).render()
    assert text.count("declare double @sin(double)") == 1


def test_multiplication_operand_order():
    module = generate_ir(parse_expression("sin(1)*2"))
    assert module.body[1] == "%1 = mul double 2.000000e+00, %0"
    assert module.body[-1] == "ret double %1"


def test_registers_numbered_in_order():
    module = generate_ir(parse_expression("sin(1)+cos(2)"))
    registers = [line.split(" = ")[0] for line in module.body[:-1]]
    assert registers == [f"%{i}" for i in range(len(registers))]
    assert module.body[-1] == f"ret double {registers[-1]}"


def test_inexact_constant_in_hex():
    text = generate_ir(parse_expression("1/3")).render()
    assert "0x" in text


def test_render_joins_parts():
    module = IRModule(body=["ret double %0"], declarations=["declare double @cos(double)"])
    text = module.render()
    assert "  ret double %0\n}\n\ndeclare double @cos(double)\n" in text


def test_empty_tree_rejected():
    with pytest.raises(ValueError):
        generate_ir(ExpressionTree())


def test_unknown_action_drops_operands():
    node = Node(
        Kind.ACTION,
        action="%",
        left=Node(Kind.NUMBER, value=1.0),
        right=Node(Kind.NUMBER, value=2.0),
    )
    with pytest.raises(ValueError):
        generate_ir(ExpressionTree(node))


def test_subtraction_node_folds():
    node = Node(
        Kind.ACTION,
        action="-",
        left=Node(Kind.NUMBER, value=5.0),
        right=Node(Kind.NUMBER, value=5.0),
    )
    module = generate_ir(ExpressionTree(node))
    assert module.body == ["ret double 0.000000e+00"]