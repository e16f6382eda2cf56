"""
KWIK - Error Taxonomy
=====================
CommandError subclasses are recoverable: they are shown to the user and
the loop continues with the store unchanged. StorageError is fatal.
"""


class KwikError(Exception):
    """Base class for all kwik errors"""


class CommandError(KwikError):
    message = "Command failed"

    def __init__(self, message: str = ""):
        super().__init__(message or self.message)


class InvalidCommand(CommandError):
    message = "Invalid command format"


class InvalidIndexFormat(CommandError):
    message = "Invalid index format"


class IndexOutOfBounds(CommandError):
    message = "Index out of bounds"


class InvalidDatetimeFormat(CommandError):
    message = "Invalid datetime format"


class StorageError(KwikError):
    """Task file could not be located, read, parsed or written"""
