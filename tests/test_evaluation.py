import math

import pytest

from expression_ast import (
    AddNode, ConstantNode, DetachedNodeError, DivideNode, Expression, IdentifierNode, MultiplyNode,
    PowerNode, SubtractNode, UnaryMinusNode, UnaryPlusNode, VariableEnvironment,
    NodeOwnershipError, clear_variables, set_variable
)
from expression_ast.logging_system import DIVISION_BY_ZERO, UNDEFINED_VARIABLE


@pytest.mark.parametrize("value", [0.0, -0.0, 5.0, -3.25, 1e308, math.inf, -math.inf])
def test_constant_returns_its_value(value):
    assert ConstantNode(value).evaluate() == value


def test_constant_nan_propagates():
    assert math.isnan(ConstantNode(math.nan).evaluate())


def test_identifier_reads_global_environment():
    set_variable("x", 10.0)
    assert IdentifierNode("x").evaluate() == 10.0


def test_identifier_reads_explicit_environment():
    set_variable("x", 10.0)
    env = VariableEnvironment({"x": 2.5})
    assert IdentifierNode("x").evaluate(env) == 2.5


def test_identifier_after_clear_is_undefined(diagnostics):
    set_variable("x", 10.0)
    node = IdentifierNode("x")
    assert node.evaluate() == 10.0

    clear_variables()
    assert node.evaluate() == 0.0
    records = diagnostics(UNDEFINED_VARIABLE)
    assert len(records) == 1
    assert records[0].variable == "x"


def test_unary_operators():
    assert UnaryPlusNode(ConstantNode(7.0)).evaluate() == 7.0
    assert UnaryMinusNode(ConstantNode(8.0)).evaluate() == -8.0
    assert UnaryMinusNode(UnaryMinusNode(ConstantNode(8.0))).evaluate() == 8.0


@pytest.mark.parametrize("node_cls, left, right, expected", [
    (AddNode, 3.0, 4.0, 7.0),
    (SubtractNode, 9.0, 5.0, 4.0),
    (MultiplyNode, 2.0, 6.0, 12.0),
    (DivideNode, 8.0, 2.0, 4.0),
    (DivideNode, 1.0, 3.0, 1.0 / 3.0),
    (PowerNode, 2.0, 3.0, 8.0),
    (PowerNode, 2.0, -1.0, 0.5),
    (PowerNode, 9.0, 0.5, 3.0),
])
def test_binary_operators(node_cls, left, right, expected):
    assert node_cls(ConstantNode(left), ConstantNode(right)).evaluate() == expected


def test_power_follows_ieee_pow():
    assert PowerNode(ConstantNode(0.0), ConstantNode(0.0)).evaluate() == 1.0
    assert PowerNode(ConstantNode(0.0), ConstantNode(-1.0)).evaluate() == math.inf
    assert math.isnan(PowerNode(ConstantNode(-8.0), ConstantNode(1.0 / 3.0)).evaluate())
    assert PowerNode(ConstantNode(-2.0), ConstantNode(3.0)).evaluate() == -8.0


def test_power_overflow_gives_infinity_without_raising():
    assert PowerNode(ConstantNode(10.0), ConstantNode(400.0)).evaluate() == math.inf


def test_results_are_python_floats():
    result = AddNode(ConstantNode(1), ConstantNode(2)).evaluate()
    assert type(result) is float


def test_demo_expression():
    set_variable("Num1", 3.0)
    set_variable("Num2", 7.0)
    tree = AddNode(
        UnaryMinusNode(IdentifierNode("Num1")),
        MultiplyNode(ConstantNode(2), SubtractNode(ConstantNode(4), IdentifierNode("Num2"))),
    )
    assert tree.evaluate() == -9.0


def test_nested_division_and_power():
    env = VariableEnvironment({"a": 3, "b": 1, "c": 5, "d": 2})
    tree = DivideNode(
        MultiplyNode(ConstantNode(2), AddNode(IdentifierNode("a"), IdentifierNode("b"))),
        PowerNode(
            SubtractNode(IdentifierNode("c"), ConstantNode(1)),
            AddNode(IdentifierNode("d"), ConstantNode(1)),
        ),
    )
    assert tree.evaluate(env) == 0.125


def test_undefined_variable_yields_zero_and_one_diagnostic(diagnostics, caplog):
    assert IdentifierNode("y").evaluate() == 0.0
    records = diagnostics()
    assert len(records) == 1
    assert records[0].condition == UNDEFINED_VARIABLE
    assert "Undefined variable 'y'" in caplog.text


def test_division_by_zero_yields_infinity_and_one_diagnostic(diagnostics, caplog):
    assert DivideNode(ConstantNode(8), ConstantNode(0)).evaluate() == math.inf
    records = diagnostics()
    assert len(records) == 1
    assert records[0].condition == DIVISION_BY_ZERO
    assert "Division by zero" in caplog.text


def test_division_by_negative_zero_is_positive_infinity(diagnostics):
    result = DivideNode(ConstantNode(-8), ConstantNode(-0.0)).evaluate()
    assert result == math.inf
    assert len(diagnostics(DIVISION_BY_ZERO)) == 1


def test_division_by_computed_zero(diagnostics):
    env = VariableEnvironment({"x": 4.0})
    tree = DivideNode(ConstantNode(1), SubtractNode(IdentifierNode("x"), ConstantNode(4)))
    assert tree.evaluate(env) == math.inf
    assert len(diagnostics(DIVISION_BY_ZERO)) == 1


def test_undefined_divisor_reports_both_conditions_in_order(diagnostics):
    tree = DivideNode(IdentifierNode("p"), IdentifierNode("q"))
    assert tree.evaluate() == math.inf
    conditions = [(r.condition, getattr(r, 'variable', None)) for r in diagnostics()]
    assert conditions == [
        (UNDEFINED_VARIABLE, "p"),
        (UNDEFINED_VARIABLE, "q"),
        (DIVISION_BY_ZERO, None),
    ]


def test_operands_are_evaluated_left_then_right(diagnostics):
    tree = AddNode(IdentifierNode("first"), MultiplyNode(IdentifierNode("second"), IdentifierNode("third")))
    assert tree.evaluate() == 0.0
    assert [r.variable for r in diagnostics(UNDEFINED_VARIABLE)] == ["first", "second", "third"]


def test_undefined_variable_does_not_stop_enclosing_evaluation():
    env = VariableEnvironment({"x": 2.0})
    tree = AddNode(IdentifierNode("missing"), MultiplyNode(IdentifierNode("x"), ConstantNode(5)))
    assert tree.evaluate(env) == 10.0


def test_infinity_from_division_flows_into_parent():
    tree = SubtractNode(DivideNode(ConstantNode(1), ConstantNode(0)), ConstantNode(1e300))
    assert tree.evaluate() == math.inf
    tree = MultiplyNode(DivideNode(ConstantNode(1), ConstantNode(0)), ConstantNode(0))
    assert math.isnan(tree.evaluate())


def test_evaluation_is_repeatable(diagnostics):
    env = VariableEnvironment({"a": 3, "b": 1, "c": 5, "d": 2})
    tree = DivideNode(
        MultiplyNode(ConstantNode(2), AddNode(IdentifierNode("a"), IdentifierNode("b"))),
        PowerNode(SubtractNode(IdentifierNode("c"), ConstantNode(1)), IdentifierNode("d")),
    )
    first = tree.evaluate(env)
    second = tree.evaluate(env)
    assert first == second == 0.5
    assert diagnostics() == []


def test_evaluation_sees_environment_updates():
    env = VariableEnvironment({"x": 1.0})
    tree = MultiplyNode(IdentifierNode("x"), ConstantNode(3))
    assert tree.evaluate(env) == 3.0
    env.set("x", 4.0)
    assert tree.evaluate(env) == 12.0


def test_expression_prefers_explicit_then_bound_then_global_environment():
    set_variable("x", 1.0)
    bound = VariableEnvironment({"x": 2.0})
    explicit = VariableEnvironment({"x": 3.0})

    assert Expression(IdentifierNode("x")).evaluate() == 1.0
    expr = Expression(IdentifierNode("x"), bound)
    assert expr.evaluate() == 2.0
    assert expr.evaluate(explicit) == 3.0


def test_expression_string_follows_released_children():
    root = AddNode(ConstantNode(1), ConstantNode(2))
    expr = Expression(root)
    assert expr.to_string() == "(1 + 2)"
    root.release_right()
    with pytest.raises(DetachedNodeError):
        expr.to_string()
    assert repr(expr) == "Expression((1 + <released>))"


def test_expression_owns_its_root():
    root = AddNode(ConstantNode(1), ConstantNode(2))
    expr = Expression(root)
    assert root.is_owned
    with pytest.raises(NodeOwnershipError):
        AddNode(root, ConstantNode(1))
    with pytest.raises(NodeOwnershipError):
        Expression(root)
    # a copy is unowned and can be wrapped again
    assert expr.copy().root == root


def test_release_root_hands_back_the_tree():
    expr = Expression(UnaryMinusNode(ConstantNode(4)))
    root = expr.release_root()
    assert not root.is_owned
    assert repr(expr) == "Expression(<released>)"
    with pytest.raises(DetachedNodeError):
        expr.evaluate()
    assert SubtractNode(root, ConstantNode(1)).evaluate() == -5.0
