"""Function registry.

Static table mapping a function name to its arity and a pure implementation
of signature ``(values, config) -> float``. The angle unit is read from the
config passed in for each call, never captured.
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from ...config import EvaluationConfig
from ...errors import ArityMismatchError, UnknownFunctionError

FunctionImpl = Callable[[Sequence[float], EvaluationConfig], float]

# Largest n for which n! is finite as a double
_MAX_FACTORIAL = 170


@dataclass(frozen=True)
class FunctionSpec:
  name: str
  min_args: int
  max_args: Optional[int]   # None means variadic
  function: FunctionImpl

  @property
  def is_variadic(self) -> bool:
    return self.max_args is None

  def accepts(self, n_args: int) -> bool:
    if n_args < self.min_args:
      return False
    return self.max_args is None or n_args <= self.max_args

  def __call__(self, values: Sequence[float], config: EvaluationConfig) -> float:
    with np.errstate(all='ignore'):
      return float(self.function(values, config))


def _to_radians(value: float, config: EvaluationConfig) -> float:
  return np.deg2rad(value) if config.uses_degrees else value


def _from_radians(value: float, config: EvaluationConfig) -> float:
  return np.rad2deg(value) if config.uses_degrees else value


def _trig(func) -> FunctionImpl:
  return lambda values, config: func(_to_radians(values[0], config))


def _inverse_trig(func) -> FunctionImpl:
  return lambda values, config: _from_radians(func(values[0]), config)


def _unary(func) -> FunctionImpl:
  return lambda values, config: func(values[0])


def _variadic(func) -> FunctionImpl:
  return lambda values, config: func(np.asarray(values, dtype=np.float64))


def _root(values: Sequence[float], config: EvaluationConfig) -> float:
  return np.power(np.float64(values[0]), np.divide(1.0, np.float64(values[1])))


def _factorial(values: Sequence[float], config: EvaluationConfig) -> float:
  value = values[0]
  if np.isnan(value):
    return np.nan
  if value >= _MAX_FACTORIAL + 1:
    return np.inf
  if value < 1:
    return 1.0
  return float(math.factorial(int(value)))


def _int(values: Sequence[float], config: EvaluationConfig) -> float:
  return np.trunc(values[0])


FUNCTION_REGISTRY: Dict[str, FunctionSpec] = {
  spec.name: spec for spec in (
    # Trigonometry; the angle unit applies to these six only
    FunctionSpec('sin', 1, 1, _trig(np.sin)),
    FunctionSpec('cos', 1, 1, _trig(np.cos)),
    FunctionSpec('tan', 1, 1, _trig(np.tan)),
    FunctionSpec('arcsin', 1, 1, _inverse_trig(np.arcsin)),
    FunctionSpec('arccos', 1, 1, _inverse_trig(np.arccos)),
    FunctionSpec('arctan', 1, 1, _inverse_trig(np.arctan)),

    # Roots and logarithms. 'log' is base e and 'ln' is base 2; callers rely on it.
    FunctionSpec('sqrt', 1, 1, _unary(np.sqrt)),
    FunctionSpec('rad', 2, 2, _root),
    FunctionSpec('log', 1, 1, _unary(np.log)),
    FunctionSpec('ln', 1, 1, _unary(np.log2)),

    # Aggregates
    FunctionSpec('avg', 1, None, _variadic(np.mean)),
    FunctionSpec('min', 1, None, _variadic(np.min)),
    FunctionSpec('max', 1, None, _variadic(np.max)),
    FunctionSpec('med', 1, None, _variadic(np.median)),

    # Integer helpers
    FunctionSpec('factorial', 1, 1, _factorial),
    FunctionSpec('ceil', 1, 1, _unary(np.ceil)),
    FunctionSpec('floor', 1, 1, _unary(np.floor)),
    FunctionSpec('int', 1, 1, _int),
  )
}


def lookup_function(name: str) -> FunctionSpec:
  spec = FUNCTION_REGISTRY.get(name)
  if spec is None:
    raise UnknownFunctionError(name)
  return spec


def check_call_arity(name: str, n_args: int) -> FunctionSpec:
  """Resolve ``name`` and verify it can be called with ``n_args`` arguments"""
  spec = lookup_function(name)
  if not spec.accepts(n_args):
    raise ArityMismatchError(name, spec.min_args, n_args, variadic=spec.is_variadic)
  return spec


def available_functions() -> List[str]:
  return sorted(FUNCTION_REGISTRY)
