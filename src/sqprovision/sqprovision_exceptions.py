"""
This module contains the exceptions raised by the sqprovision framework.
"""


class SqProvisionException(Exception):
    """
    Exceptions raised by the sqprovision framework.
    """

    def __init__(self, message: str):
        """
        Initializes the exception with the given message.
        """
        super().__init__(message)


class InvalidArgumentError(SqProvisionException, ValueError):
    """
    Raised when a required argument is missing or blank. Raised before any I/O.
    """

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"Argument '{argument_name}' must not be None or empty")
