# Test Harness Module
"""
Table-driven runner comparing function outputs to literal expected values.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import suite
    return getattr(suite, name)

__all__ = [
    'TestCase',
    'CaseResult',
    'SuiteReport',
    'Outcome',
    'run_test_case',
    'run_suite',
    'uncurry',
    'uncurry3',
]
