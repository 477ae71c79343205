# donutviz/core/errors.py
from typing import List, Optional

class DonutVizError(Exception):
    pass

class ConfigurationError(DonutVizError, ValueError):
    """Inputs that cannot describe a chart (raised at construction)."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]

class ComputationError(DonutVizError, ArithmeticError):
    """A draw cycle whose geometry would be undefined (zero/negative totals)."""
