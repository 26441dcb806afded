"""Process exit codes and the base error raised by commands."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Common GNU/Linux exit codes used by the command line."""

    OPERATION_NOT_PERMITTED = 1
    NO_SUCH_FILE_OR_DIRECTORY = 2
    RESOURCE_TEMPORARILY_UNAVAILABLE = 11


class CommandError(Exception):
    """A command failed; the message is meant for the user."""