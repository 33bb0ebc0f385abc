from typing import Dict, List, Mapping, Optional, Tuple
import numbers
import threading


def coerce_real(value, what: str) -> float:
  """float(value) for real numbers that fit a double; TypeError for anything else"""
  if isinstance(value, bool) or not isinstance(value, numbers.Real):
    raise TypeError(f"{what} must be a number, got {type(value).__name__}")
  try:
    return float(value)
  except OverflowError:
    raise TypeError(f"{what} is too large for a float") from None


class VariableEnvironment:
  """Name to value bindings consulted by identifier nodes.

  Bindings are set or overwritten one at a time and removed only all at once.
  A single lock guards every access so one environment can be shared between
  threads; independent evaluations can also use separate instances.
  """

  def __init__(self, bindings: Optional[Mapping[str, float]] = None):
    self._bindings: Dict[str, float] = {}
    self._lock = threading.Lock()
    if bindings:
      for name, value in bindings.items():
        self.set(name, value)

  def set(self, name: str, value: float):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a str, got {type(name).__name__}")
    value = coerce_real(value, f"Value of '{name}'")
    with self._lock:
      self._bindings[name] = value

  def lookup(self, name: str) -> Tuple[bool, float]:
    """Return (found, value); value is 0.0 when the name is unbound."""
    with self._lock:
      if name in self._bindings:
        return True, self._bindings[name]
    return False, 0.0

  def get(self, name: str) -> Optional[float]:
    with self._lock:
      return self._bindings.get(name)

  def clear(self):
    with self._lock:
      self._bindings.clear()

  def names(self) -> List[str]:
    with self._lock:
      return sorted(self._bindings)

  def snapshot(self) -> Dict[str, float]:
    with self._lock:
      return dict(self._bindings)

  def __contains__(self, name) -> bool:
    with self._lock:
      return name in self._bindings

  def __len__(self) -> int:
    with self._lock:
      return len(self._bindings)

  def __repr__(self) -> str:
    return f"VariableEnvironment({self.snapshot()!r})"


# Global instance - created on first use
_GLOBAL_ENVIRONMENT: Optional[VariableEnvironment] = None
_INITIALIZED = False
_ENVIRONMENT_LOCK = threading.Lock()


def get_global_environment() -> VariableEnvironment:
  """Get the process-wide environment used when no environment is passed"""
  global _GLOBAL_ENVIRONMENT, _INITIALIZED

  # Fast path - no locking needed once initialized
  if _INITIALIZED and _GLOBAL_ENVIRONMENT is not None:
    return _GLOBAL_ENVIRONMENT

  with _ENVIRONMENT_LOCK:
    if not _INITIALIZED or _GLOBAL_ENVIRONMENT is None:
      _GLOBAL_ENVIRONMENT = VariableEnvironment()
      _INITIALIZED = True

  return _GLOBAL_ENVIRONMENT


def reset_global_environment():
  """Drop the process-wide environment; the next access creates an empty one"""
  global _GLOBAL_ENVIRONMENT, _INITIALIZED
  with _ENVIRONMENT_LOCK:
    _GLOBAL_ENVIRONMENT = None
    _INITIALIZED = False


def resolve_environment(env: Optional[VariableEnvironment]) -> VariableEnvironment:
  return env if env is not None else get_global_environment()


def set_variable(name: str, value: float):
  get_global_environment().set(name, value)


def clear_variables():
  get_global_environment().clear()
