# Python

"""Expression AST Package

Arithmetic expression trees evaluated against a variable environment, with
fault-tolerant handling of undefined variables and division by zero.
"""

from .exceptions import ExpressionTreeError, NodeOwnershipError, DetachedNodeError
from .expression_tree import (
  Expression, Node, ConstantNode, IdentifierNode,
  UnaryOpNode, UnaryPlusNode, UnaryMinusNode,
  BinaryOpNode, AddNode, SubtractNode, MultiplyNode, DivideNode, PowerNode,
  NodeType, VariableEnvironment, get_global_environment, reset_global_environment,
  set_variable, clear_variables, SymPyConverter, ExpressionValidator
)
from .logging_system import LogLevel, EvaluationLogger, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "IdentifierNode",
  "UnaryOpNode", "UnaryPlusNode", "UnaryMinusNode",
  "BinaryOpNode", "AddNode", "SubtractNode", "MultiplyNode", "DivideNode", "PowerNode",
  "NodeType", "VariableEnvironment", "get_global_environment", "reset_global_environment",
  "set_variable", "clear_variables", "SymPyConverter", "ExpressionValidator",
  "ExpressionTreeError", "NodeOwnershipError", "DetachedNodeError",
  "LogLevel", "EvaluationLogger", "get_logger", "set_log_level", "configure_logging"
]
