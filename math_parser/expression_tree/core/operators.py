import numpy as np
import numba
from enum import IntEnum

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  SCI_NOTATION = 5
  # Named function call, resolved through the function registry
  FUNCTION = 6

BINARY_OPS = (OpType.ADD, OpType.SUB, OpType.MUL, OpType.DIV, OpType.POW, OpType.SCI_NOTATION)

# Mapping dictionaries
BINARY_OP_MAP = {
  '+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL,
  '/': OpType.DIV, '^': OpType.POW, 'E': OpType.SCI_NOTATION
}
OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}

# Higher binds tighter; equal precedence resolves left to right
PRECEDENCE = {
  OpType.ADD: 1,
  OpType.SUB: 1,
  OpType.MUL: 2,
  OpType.DIV: 2,
  OpType.POW: 3,
  OpType.SCI_NOTATION: 3,
  OpType.FUNCTION: 4,
}

def is_binary_op(op_type) -> bool:
  return op_type in BINARY_OPS

# error_model='numpy' gives IEEE-754 results (inf/nan) instead of ZeroDivisionError
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  elif op_type == OpType.SCI_NOTATION:
    return left_val * np.power(10.0, right_val)
  return np.nan

def evaluate_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  return float(evaluate_binary_op_fast(float(left_val), float(right_val), OpType(op_type)))
