"""Domain exceptions for octoprint-format."""


class InvalidNumberError(ValueError):
    """Raised when a present value cannot be read as a finite number."""

    pass


class InvalidPayloadError(Exception):
    """Raised when a job payload does not have the expected shape."""

    pass
