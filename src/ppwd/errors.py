"""Exceptions raised by ppwd."""


class PpwdError(Exception):
    """Base class for all ppwd errors."""


class InvalidArgumentError(PpwdError, ValueError):
    """The length argument could not be parsed."""

    def __init__(self, value: str, reason: str = "not a valid integer"):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid length {value!r}: {reason}")


class EnvironmentUnavailableError(PpwdError):
    """The current working directory could not be determined."""

    def __init__(self, cause: OSError):
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"cannot determine current directory: {detail}")
