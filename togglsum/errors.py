"""Exception types raised at the boundaries of the togglsum pipeline."""


class TogglSumError(Exception):
    """Base class for all togglsum errors."""

    exit_code = 1


class CredentialError(TogglSumError):
    """The API key could not be read, asked for, or stored."""

    exit_code = 2


class FetchError(TogglSumError):
    """The request to the Toggl API failed."""

    exit_code = 3


class EntryDecodeError(TogglSumError):
    """The API response could not be turned into time entries."""

    exit_code = 4


class SelectionCancelled(TogglSumError):
    """The user left the selection without confirming it."""

    exit_code = 0


class SelectionError(TogglSumError):
    """The interactive selection broke down."""

    exit_code = 0
