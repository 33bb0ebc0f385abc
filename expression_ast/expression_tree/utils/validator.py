from typing import List, Optional
from ..core.node import Node, BinaryOpNode, ConstantNode
from ..core.operators import NodeType
from ..environment import VariableEnvironment, resolve_environment
from .tree_utils import get_identifier_names, find_nodes_by_kind


class ExpressionValidator:
  """Predicts sentinel fallbacks without evaluating the tree"""

  @staticmethod
  def find_unbound_identifiers(node: Node, env: Optional[VariableEnvironment] = None) -> List[str]:
    env = resolve_environment(env)
    return [name for name in get_identifier_names(node) if name not in env]

  @staticmethod
  def find_constant_zero_divisors(node: Node) -> List[BinaryOpNode]:
    """Divide nodes whose right operand is the literal constant zero"""
    divisors = []
    for divide in find_nodes_by_kind(node, NodeType.DIVIDE):
      if isinstance(divide, BinaryOpNode) and isinstance(divide.right, ConstantNode):
        if divide.right.value == 0.0:
          divisors.append(divide)
    return divisors

  @staticmethod
  def is_structurally_valid(node: Node) -> bool:
    """Every operator holds its children and every child is marked as owned"""
    for child in node.children():
      if not child.is_owned:
        return False
      if not ExpressionValidator.is_structurally_valid(child):
        return False
    return True

  @staticmethod
  def will_evaluate_cleanly(node: Node, env: Optional[VariableEnvironment] = None) -> bool:
    """False when an undefined variable or a literal zero divisor is certain.

    Divisors that only evaluate to zero at run time are not detected.
    """
    if ExpressionValidator.find_unbound_identifiers(node, env):
      return False
    return not ExpressionValidator.find_constant_zero_divisors(node)
