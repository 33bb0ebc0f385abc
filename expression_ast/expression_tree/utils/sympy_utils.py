import sympy as sp
from typing import Dict, Any, Optional
from ..core.node import Node
from ..environment import VariableEnvironment, resolve_environment


class SymPyConverter:
  """Read-only SymPy views of an expression tree"""

  def to_sympy(self, node: Node) -> sp.Expr:
    return node.to_sympy()

  def substitute(self, node: Node, env: Optional[VariableEnvironment] = None) -> sp.Expr:
    """Replace the bound identifiers with their values; unbound ones stay symbolic"""
    sympy_expr = node.to_sympy()
    bindings = resolve_environment(env).snapshot()
    substitutions = {
      symbol: sp.Float(bindings[symbol.name])
      for symbol in sympy_expr.free_symbols
      if symbol.name in bindings
    }
    return sympy_expr.subs(substitutions)

  def describe(self, node: Node) -> Dict[str, Any]:
    """
    Summarize the tree in SymPy terms

    Returns:
        Dict with the SymPy expression, its free symbols and operation count
    """
    sympy_expr = node.to_sympy()
    return {
      'sympy': sympy_expr,
      'free_symbols': sorted(symbol.name for symbol in sympy_expr.free_symbols),
      'operation_count': sp.count_ops(sympy_expr),
    }

  def latex_representation(self, node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(node.to_sympy())
