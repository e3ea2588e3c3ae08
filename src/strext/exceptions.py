"""Exception classes for strext."""


class StrextError(Exception):
    """Base exception for strext errors."""

    pass


class InvalidArgumentError(StrextError, ValueError):
    """Raised when a caller passes an out-of-range argument."""

    def __init__(self, message: str, param_name: str):
        """Initialize the error.

        Args:
            message: Description of the violated constraint.
            param_name: Name of the offending parameter.
        """
        self.message = message
        self.param_name = param_name
        super().__init__(f"{message} (Parameter '{param_name}')")
