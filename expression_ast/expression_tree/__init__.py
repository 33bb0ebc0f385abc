"""Expression Tree Module

Arithmetic expression nodes, their evaluation, and the variable environment
identifier nodes read from.
"""

from .environment import (
    VariableEnvironment,
    get_global_environment,
    reset_global_environment,
    set_variable,
    clear_variables
)
from .core.node import (
    Node,
    ConstantNode,
    IdentifierNode,
    UnaryOpNode,
    UnaryPlusNode,
    UnaryMinusNode,
    BinaryOpNode,
    AddNode,
    SubtractNode,
    MultiplyNode,
    DivideNode,
    PowerNode
)
from .core.operators import NodeType, UNARY_OP_MAP, BINARY_OP_MAP
from .expression import Expression
from .utils import SymPyConverter, ExpressionValidator

__all__ = [
    "Expression",
    "Node", "ConstantNode", "IdentifierNode",
    "UnaryOpNode", "UnaryPlusNode", "UnaryMinusNode",
    "BinaryOpNode", "AddNode", "SubtractNode", "MultiplyNode", "DivideNode", "PowerNode",
    "NodeType", "UNARY_OP_MAP", "BINARY_OP_MAP",
    "VariableEnvironment", "get_global_environment", "reset_global_environment",
    "set_variable", "clear_variables",
    "SymPyConverter", "ExpressionValidator"
]
