"""Exceptions raised for misuse of the expression tree API.

Undefined variables and division by zero are not exceptions: they are reported
as diagnostics by the logging system and evaluation continues with a sentinel.
"""


class ExpressionTreeError(Exception):
  """Base class for expression tree errors."""


class NodeOwnershipError(ExpressionTreeError, ValueError):
  """Raised when a node that already has a parent is given to another parent."""

  def __init__(self, node):
    super().__init__(f"Node {node!r} already belongs to another expression tree")
    self.node = node


class DetachedNodeError(ExpressionTreeError, RuntimeError):
  """Raised when a node (or Expression) whose child was released is used."""

  def __init__(self, node, slot: str):
    super().__init__(f"{type(node).__name__} has no {slot}: the child was released")
    self.node = node
    self.slot = slot
