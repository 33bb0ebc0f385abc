import math
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .operators import (
  NodeType, UNARY_OP_SYMBOLS, BINARY_OP_SYMBOLS,
  evaluate_unary_op, evaluate_binary_op
)
from ..environment import VariableEnvironment, coerce_real, resolve_environment
from ...exceptions import NodeOwnershipError, DetachedNodeError
from ...logging_system import get_logger


class Node(ABC):
  """Base node class; a node belongs to at most one parent"""

  __slots__ = ('_owned',)

  def __init__(self):
    self._owned = False

  @abstractmethod
  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    pass

  @abstractmethod
  def kind(self) -> NodeType:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _key(self) -> tuple:
    pass

  @property
  def is_owned(self) -> bool:
    return self._owned

  def size(self) -> int:
    """Number of nodes in this subtree"""
    return 1 + sum(child.size() for child in self.children())

  def depth(self) -> int:
    """Longest root to leaf path; a leaf has depth 1"""
    return 1 + max((child.depth() for child in self.children()), default=0)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  def __hash__(self) -> int:
    return hash(self._key())

  def _display_string(self) -> str:
    """Like to_string, but shows released children as <released> instead of raising"""
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._display_string()})"


def _adopt(child: Node) -> Node:
  if not isinstance(child, Node):
    raise TypeError(f"Expected a Node, got {type(child).__name__}")
  if child._owned:
    raise NodeOwnershipError(child)
  child._owned = True
  return child


def _release(child: Node) -> Node:
  child._owned = False
  return child


def _display(child: Optional[Node]) -> str:
  return child._display_string() if child is not None else "<released>"


class ConstantNode(Node):
  __slots__ = ('_value',)

  def __init__(self, value: float):
    super().__init__()
    self._value = coerce_real(value, "Constant value")

  @property
  def value(self) -> float:
    return self._value

  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    return self._value

  def kind(self) -> NodeType:
    return NodeType.CONSTANT

  def children(self) -> Tuple[Node, ...]:
    return ()

  def to_string(self) -> str:
    return f"{self._value:g}"

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self._value)

  def to_sympy(self) -> sp.Expr:
    if math.isfinite(self._value) and self._value.is_integer():
      return sp.Integer(int(self._value))
    return sp.Float(self._value)

  def _key(self) -> tuple:
    # repr keeps NaN constants equal to one another
    return (NodeType.CONSTANT, repr(self._value))


class IdentifierNode(Node):
  __slots__ = ('_name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str):
      raise TypeError(f"Identifier name must be a str, got {type(name).__name__}")
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    found, value = resolve_environment(env).lookup(self._name)
    if not found:
      get_logger().undefined_variable(self._name)
      return 0.0
    return value

  def kind(self) -> NodeType:
    return NodeType.IDENTIFIER

  def children(self) -> Tuple[Node, ...]:
    return ()

  def to_string(self) -> str:
    return self._name

  def copy(self) -> 'IdentifierNode':
    return IdentifierNode(self._name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self._name)

  def _key(self) -> tuple:
    return (NodeType.IDENTIFIER, self._name)


class UnaryOpNode(Node):
  """Base for single-operand operators"""

  __slots__ = ('_operand',)

  def __init__(self, operand: Node):
    super().__init__()
    self._operand: Optional[Node] = _adopt(operand)

  @property
  def operand(self) -> Node:
    if self._operand is None:
      raise DetachedNodeError(self, 'operand')
    return self._operand

  def release_operand(self) -> Node:
    """Detach and return the operand; this node can no longer be evaluated"""
    operand = self.operand
    self._operand = None
    return _release(operand)

  @property
  def operator(self) -> str:
    return UNARY_OP_SYMBOLS[self.kind()]

  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    operand_val = self.operand.evaluate(resolve_environment(env))
    return float(evaluate_unary_op(operand_val, self.kind()))

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def to_string(self) -> str:
    return f"{self.operator}{self.operand.to_string()}"

  def _display_string(self) -> str:
    return f"{self.operator}{_display(self._operand)}"

  def copy(self) -> 'UnaryOpNode':
    return type(self)(self.operand.copy())

  def _key(self) -> tuple:
    return (self.kind(), self.operand._key())


class UnaryPlusNode(UnaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.UNARY_PLUS

  def to_sympy(self) -> sp.Expr:
    return self.operand.to_sympy()


class UnaryMinusNode(UnaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.UNARY_MINUS

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(-1, self.operand.to_sympy())


class BinaryOpNode(Node):
  """Base for two-operand operators; the left operand is always evaluated first"""

  __slots__ = ('_left', '_right')

  def __init__(self, left: Node, right: Node):
    super().__init__()
    if left is right:
      raise NodeOwnershipError(right)
    self._left: Optional[Node] = _adopt(left)
    try:
      self._right: Optional[Node] = _adopt(right)
    except (TypeError, NodeOwnershipError):
      _release(left)
      raise

  @property
  def left(self) -> Node:
    if self._left is None:
      raise DetachedNodeError(self, 'left operand')
    return self._left

  @property
  def right(self) -> Node:
    if self._right is None:
      raise DetachedNodeError(self, 'right operand')
    return self._right

  def release_left(self) -> Node:
    left = self.left
    self._left = None
    return _release(left)

  def release_right(self) -> Node:
    right = self.right
    self._right = None
    return _release(right)

  @property
  def operator(self) -> str:
    return BINARY_OP_SYMBOLS[self.kind()]

  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    env = resolve_environment(env)
    left_val = self.left.evaluate(env)
    right_val = self.right.evaluate(env)
    return float(evaluate_binary_op(left_val, right_val, self.kind()))

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def _display_string(self) -> str:
    return f"({_display(self._left)} {self.operator} {_display(self._right)})"

  def copy(self) -> 'BinaryOpNode':
    return type(self)(self.left.copy(), self.right.copy())

  def _key(self) -> tuple:
    return (self.kind(), self.left._key(), self.right._key())


class AddNode(BinaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.ADD

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self.left.to_sympy(), self.right.to_sympy())


class SubtractNode(BinaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.SUBTRACT

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self.left.to_sympy(), sp.Mul(-1, self.right.to_sympy()))


class MultiplyNode(BinaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.MULTIPLY

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self.left.to_sympy(), self.right.to_sympy())


class DivideNode(BinaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.DIVIDE

  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    env = resolve_environment(env)
    left_val = self.left.evaluate(env)
    right_val = self.right.evaluate(env)
    if right_val == 0.0:
      get_logger().division_by_zero()
      return math.inf
    return float(evaluate_binary_op(left_val, right_val, NodeType.DIVIDE))

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self.left.to_sympy(), sp.Pow(self.right.to_sympy(), -1))


class PowerNode(BinaryOpNode):
  __slots__ = ()

  def kind(self) -> NodeType:
    return NodeType.POWER

  def to_sympy(self) -> sp.Expr:
    return sp.Pow(self.left.to_sympy(), self.right.to_sympy())


NODE_CLASSES = {
  NodeType.CONSTANT: ConstantNode,
  NodeType.IDENTIFIER: IdentifierNode,
  NodeType.UNARY_PLUS: UnaryPlusNode,
  NodeType.UNARY_MINUS: UnaryMinusNode,
  NodeType.ADD: AddNode,
  NodeType.SUBTRACT: SubtractNode,
  NodeType.MULTIPLY: MultiplyNode,
  NodeType.DIVIDE: DivideNode,
  NodeType.POWER: PowerNode,
}
