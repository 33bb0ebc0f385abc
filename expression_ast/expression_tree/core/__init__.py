"""Core expression tree components."""

from .node import (
    Node, ConstantNode, IdentifierNode,
    UnaryOpNode, UnaryPlusNode, UnaryMinusNode,
    BinaryOpNode, AddNode, SubtractNode, MultiplyNode, DivideNode, PowerNode,
    NODE_CLASSES
)
from .operators import (
    NodeType, UNARY_OP_MAP, BINARY_OP_MAP, UNARY_OP_SYMBOLS, BINARY_OP_SYMBOLS,
    node_arity, evaluate_unary_op, evaluate_binary_op
)

__all__ = [
    'Node', 'ConstantNode', 'IdentifierNode',
    'UnaryOpNode', 'UnaryPlusNode', 'UnaryMinusNode',
    'BinaryOpNode', 'AddNode', 'SubtractNode', 'MultiplyNode', 'DivideNode', 'PowerNode',
    'NODE_CLASSES',
    'NodeType', 'UNARY_OP_MAP', 'BINARY_OP_MAP', 'UNARY_OP_SYMBOLS', 'BINARY_OP_SYMBOLS',
    'node_arity', 'evaluate_unary_op', 'evaluate_binary_op'
]
