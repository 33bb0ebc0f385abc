from typing import List, Optional
from .core.node import Node, _adopt, _release
from .core.operators import NodeType
from .environment import VariableEnvironment
from .utils.tree_utils import get_identifier_names
from ..exceptions import DetachedNodeError
from ..logging_system import get_logger
import sympy as sp


class Expression:
  """Owns the root of an expression tree, optionally with its own environment.

  The root is adopted like a child, so it cannot also be placed under another
  node or wrapped twice until release_root hands it back.
  """

  __slots__ = ('_root', 'environment')

  def __init__(self, root: Node, environment: Optional[VariableEnvironment] = None):
    if not isinstance(root, Node):
      raise TypeError(f"Expected a Node, got {type(root).__name__}")
    self._root: Optional[Node] = _adopt(root)
    self.environment = environment

  @property
  def root(self) -> Node:
    if self._root is None:
      raise DetachedNodeError(self, 'root')
    return self._root

  def release_root(self) -> Node:
    """Detach and return the root; it may then be adopted elsewhere"""
    root = self.root
    self._root = None
    return _release(root)

  def evaluate(self, env: Optional[VariableEnvironment] = None) -> float:
    """Evaluate with env, else the bound environment, else the global one"""
    if env is None:
      env = self.environment
    result = self.root.evaluate(env)
    get_logger().evaluation_result(self.to_string(), result)
    return result

  def kind(self) -> NodeType:
    return self.root.kind()

  def to_string(self) -> str:
    return self.root.to_string()

  def copy(self) -> 'Expression':
    return Expression(self.root.copy(), self.environment)

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def identifiers(self) -> List[str]:
    """Sorted distinct variable names referenced by the tree"""
    return get_identifier_names(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __repr__(self) -> str:
    root = "<released>" if self._root is None else self._root._display_string()
    return f"Expression({root})"
