"""Guest-facing error messages and recovery hints per error state."""

from typing import Optional
from shared.domain.consts import ErrorAction
from shared.domain.status import ErrorState

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

ERROR_MESSAGES: dict[ErrorState, str] = {
    ErrorState.FILE_NOT_FOUND:
        "Unable to load password file. Please contact staff for assistance.",
    ErrorState.INVALID_CSV_FORMAT:
        "Password file format is invalid. Please contact staff for assistance.",
    ErrorState.NO_PASSWORD_FOR_DATE:
        "No password available for today. Please check with staff for the current password.",
    ErrorState.PARSING_ERROR:
        "Unable to read password file. Please contact staff for assistance.",
    ErrorState.CONFIGURATION_ERROR:
        "System configuration error. Please contact staff for assistance.",
}

# Errors a guest might clear by trying again; the rest need staff to fix the file
RECOVERABLE_ERRORS = frozenset({
    ErrorState.PARSING_ERROR,
    ErrorState.CONFIGURATION_ERROR,
})


def get_error_message(
    error_state: Optional[ErrorState], custom_message: Optional[str] = None
) -> str:
    """Return the custom message if given, else the stock message for the state."""
    if custom_message:
        return custom_message
    if error_state is None:
        return DEFAULT_ERROR_MESSAGE
    return ERROR_MESSAGES.get(error_state, DEFAULT_ERROR_MESSAGE)


def is_recoverable_error(error_state: Optional[ErrorState]) -> bool:
    """True if retrying the lookup might succeed without operator action."""
    return error_state in RECOVERABLE_ERRORS


def get_error_action_text(error_state: Optional[ErrorState]) -> str:
    """Label for the action offered alongside an error."""
    if error_state is None or is_recoverable_error(error_state):
        return ErrorAction.TRY_AGAIN
    return ErrorAction.CONTACT_STAFF
