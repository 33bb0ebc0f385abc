#!/usr/bin/env python3
"""
Command-line entry point.

Without options prints usage. ``--run-tests`` evaluates a fixed set of trees
and reports each check; ``--demo`` evaluates ``-Num1 + 2 * (4 - Num2)``.
"""
import argparse
import math
import sys
from typing import Callable, List, Optional, Tuple

from .expression_tree import (
    VariableEnvironment, ConstantNode, IdentifierNode, UnaryPlusNode, UnaryMinusNode,
    AddNode, SubtractNode, MultiplyNode, DivideNode, PowerNode, Node
)
from .logging_system import LogLevel, configure_logging


def build_demo_tree() -> Node:
    return AddNode(
        UnaryMinusNode(IdentifierNode("Num1")),
        MultiplyNode(ConstantNode(2), SubtractNode(ConstantNode(4), IdentifierNode("Num2"))),
    )


def self_test_cases() -> List[Tuple[str, Callable[[], Node], Optional[dict], float]]:
    """(name, tree factory, bindings, expected) for the canned self-test"""
    return [
        ("constant", lambda: ConstantNode(5.0), None, 5.0),
        ("identifier", lambda: IdentifierNode("x"), {"x": 10.0}, 10.0),
        ("unary_plus", lambda: UnaryPlusNode(ConstantNode(7.0)), None, 7.0),
        ("unary_minus", lambda: UnaryMinusNode(ConstantNode(8.0)), None, -8.0),
        ("add", lambda: AddNode(ConstantNode(3.0), ConstantNode(4.0)), None, 7.0),
        ("subtract", lambda: SubtractNode(ConstantNode(9.0), ConstantNode(5.0)), None, 4.0),
        ("multiply", lambda: MultiplyNode(ConstantNode(2.0), ConstantNode(6.0)), None, 12.0),
        ("divide", lambda: DivideNode(ConstantNode(8.0), ConstantNode(2.0)), None, 4.0),
        ("power", lambda: PowerNode(ConstantNode(2.0), ConstantNode(3.0)), None, 8.0),
        ("identifier_undefined_variable", lambda: IdentifierNode("y"), None, 0.0),
        ("divide_by_zero", lambda: DivideNode(ConstantNode(8.0), ConstantNode(0.0)), None, math.inf),
        ("demo_expression", build_demo_tree, {"Num1": 3.0, "Num2": 7.0}, -9.0),
    ]


def run_self_test(out=None) -> int:
    out = out if out is not None else sys.stdout
    for name, factory, bindings, expected in self_test_cases():
        env = VariableEnvironment(bindings)
        actual = factory().evaluate(env)
        if actual != expected:
            print(f"Test: {name} ... Failed (expected: {expected!r} but got {actual!r}).", file=out)
            return 1
        print(f"Test: {name} ... Passed.", file=out)
    print("All tests passed successfully.", file=out)
    return 0


def run_demo(out=None) -> int:
    out = out if out is not None else sys.stdout
    env = VariableEnvironment({"Num1": 3.0, "Num2": 7.0})
    result = build_demo_tree().evaluate(env)
    print(f"Result: {result:g}", file=out)
    return 0


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Evaluate arithmetic expression trees.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--run-tests", action="store_true",
                      help="Run the self-test for the expression evaluation code.")
    mode.add_argument("--demo", action="store_true",
                      help="Evaluate -Num1 + 2 * (4 - Num2) with Num1=3 and Num2=7.")
    parser.add_argument("--log-level", choices=[level.name.lower() for level in LogLevel],
                        default="moderate", help="Verbosity of the diagnostic stream.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(log_level=LogLevel[args.log_level.upper()])

    if args.run_tests:
        return run_self_test()
    if args.demo:
        return run_demo()
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
