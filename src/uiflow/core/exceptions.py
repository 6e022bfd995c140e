"""uiflow exception hierarchy.

This module defines the base exception class and the specialized exceptions
raised by the action/wait layer and the environment configuration.
"""


class UIFlowError(Exception):
    """Base exception for all uiflow errors.

    All custom exceptions in uiflow should inherit from this class
    so a test can catch suite failures separately from assertion errors.
    """

    pass


class ConfigurationError(UIFlowError):
    """Raised when environment configuration is invalid or missing.

    Example:
        raise ConfigurationError("BASE_URL must start with http:// or https://")
    """

    pass


class ActionError(UIFlowError):
    """Raised when an element interaction could not complete.

    The element may be missing, detached, not actionable (hidden, disabled,
    covered) or the action may have exceeded its timeout. The underlying
    Playwright error is chained as ``__cause__``.

    Attributes:
        operation: Name of the attempted action (e.g. "click").
        target: Description of the locator the action ran against.

    Example:
        raise ActionError(operation="click", target="get_by_role('button')", message="Timeout")
    """

    def __init__(self, operation: str, target: str, message: str) -> None:
        self.operation = operation
        self.target = target
        super().__init__(f"{operation} failed on {target}: {message}")


class WaitTimeoutError(UIFlowError):
    """Raised when a page condition did not hold within its bound.

    Attributes:
        condition: Human readable description of the awaited condition.
        timeout_ms: Bound that was exceeded, None for library defaults.
    """

    def __init__(self, condition: str, timeout_ms: float | None) -> None:
        self.condition = condition
        self.timeout_ms = timeout_ms
        bound = f"{timeout_ms:g}ms" if timeout_ms is not None else "default timeout"
        super().__init__(f"Timed out after {bound} waiting for {condition}")


class ElementCountMismatchError(UIFlowError, AssertionError):
    """Raised when the number of matched elements differs from the expected count.

    Never retried. Also an AssertionError so pytest reports it as a failed
    expectation rather than an error.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} elements, but found {actual}")
