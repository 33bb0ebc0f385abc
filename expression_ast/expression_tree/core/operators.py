import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  IDENTIFIER = 1
  UNARY_PLUS = 2
  UNARY_MINUS = 3
  ADD = 4
  SUBTRACT = 5
  MULTIPLY = 6
  DIVIDE = 7
  POWER = 8

# Mapping dictionaries
UNARY_OP_MAP = {'+': NodeType.UNARY_PLUS, '-': NodeType.UNARY_MINUS}
BINARY_OP_MAP = {
    '+': NodeType.ADD, '-': NodeType.SUBTRACT, '*': NodeType.MULTIPLY,
    '/': NodeType.DIVIDE, '^': NodeType.POWER
}

UNARY_OP_SYMBOLS = {op_type: symbol for symbol, op_type in UNARY_OP_MAP.items()}
BINARY_OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}

LEAF_TYPES = frozenset({NodeType.CONSTANT, NodeType.IDENTIFIER})
UNARY_TYPES = frozenset(UNARY_OP_MAP.values())
BINARY_TYPES = frozenset(BINARY_OP_MAP.values())


def node_arity(node_type: NodeType) -> int:
  if node_type in LEAF_TYPES:
    return 0
  if node_type in UNARY_TYPES:
    return 1
  return 2


# Kernels run on float64 scalars without fastmath so that inf/NaN follow IEEE-754.
# Callers must screen zero divisors before DIVIDE reaches the kernel.

@numba.njit(cache=True)
def evaluate_unary_op(operand_val, op_type):
  if op_type == NodeType.UNARY_PLUS:
    return operand_val
  elif op_type == NodeType.UNARY_MINUS:
    return -operand_val
  return np.nan

@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == NodeType.ADD:
    return left_val + right_val
  elif op_type == NodeType.SUBTRACT:
    return left_val - right_val
  elif op_type == NodeType.MULTIPLY:
    return left_val * right_val
  elif op_type == NodeType.DIVIDE:
    return left_val / right_val
  elif op_type == NodeType.POWER:
    return np.power(left_val, right_val)
  return np.nan
