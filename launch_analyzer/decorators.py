"""Decorators for use throughout the launch_analyzer package.

This module contains reusable decorators organized by category:
1. Error Handling - Decorators for translating and logging errors
2. Performance - Decorators for measuring execution time
"""

import functools
import time
from typing import Any, Callable, TypeVar

from pydantic import ValidationError as PydanticValidationError

from launch_analyzer.logging_config import get_logger, log_with_context
from launch_analyzer.utils.errors import ErrorCode, ValidationError

# Type variables for better type hints
F = TypeVar('F', bound=Callable[..., Any])

# Set up logger
logger = get_logger(__name__)

# ===============================================================
# ERROR HANDLING DECORATORS
# ===============================================================

def handle_validation_errors(func: F) -> F:
    """Decorator to turn pydantic validation failures into ValidationError.

    Analyzer methods accept either models or plain dictionaries; dictionaries
    are validated on entry. Any pydantic failure raised inside the wrapped
    function is logged and re-raised as the package's own ValidationError
    with the pydantic error list attached.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with validation error translation
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            log_with_context(
                logger,
                "warning",
                f"Invalid input for {func.__name__}: {e.error_count()} error(s)",
                function=func.__name__,
                error_code=ErrorCode.VALIDATION_ERROR.value
            )
            raise ValidationError(
                f"Invalid input for {func.__name__}",
                details={"model": e.title},
                errors=[
                    {
                        "loc": ".".join(str(part) for part in error["loc"]),
                        "msg": error["msg"],
                        "type": error["type"],
                    }
                    for error in errors
                ]
            ) from e

    return wrapper


# ===============================================================
# PERFORMANCE DECORATORS
# ===============================================================

def measure_execution_time(func: F) -> F:
    """Decorator to measure and log execution time of a function.

    Args:
        func: Function to wrap

    Returns:
        Wrapped function with execution time measurement
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            execution_time = time.perf_counter() - start_time
            logger.debug(f"{func.__name__} executed in {execution_time:.4f} seconds")

    return wrapper
