import pytest

from expression_ast import configure_logging, reset_global_environment
from expression_ast.logging_system import LogLevel


@pytest.fixture(autouse=True)
def fresh_state():
    """Each test starts with an empty global environment and a new logger."""
    reset_global_environment()
    configure_logging(log_level=LogLevel.MODERATE)
    yield
    reset_global_environment()


@pytest.fixture
def diagnostics(caplog):
    """Return the diagnostic records captured so far, optionally of one condition."""
    def _collect(condition=None):
        return [
            record for record in caplog.records
            if hasattr(record, 'condition') and (condition is None or record.condition == condition)
        ]
    return _collect
