"""Error taxonomy shared by services and routes.

Services raise :class:`StoreError` the way a stored procedure raises an
exception; :func:`remap_store_error` turns it into one of the HTTP-facing
:class:`ApiError` subclasses by looking at the message.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidInput(ApiError):
    status_code = 400
    default_message = "Invalid input"


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "Authentication required"


class NotFoundOrForbidden(ApiError):
    # "does not exist" and "no access" are deliberately the same answer
    status_code = 404
    default_message = "Resource not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Resource already exists"


class StoreError(Exception):
    """Raised by the service layer when a precondition does not hold."""


# first match wins
STORE_ERROR_RULES = (
    ("not found", NotFoundOrForbidden),
    ("already", Conflict),
    ("invalid", InvalidInput),
    ("must", InvalidInput),
    ("cannot", InvalidInput),
)


def remap_store_error(err):
    """Return the ApiError for a StoreError, or None if the message is unknown."""
    message = str(err)
    lowered = message.lower()
    for needle, error_cls in STORE_ERROR_RULES:
        if needle in lowered:
            return error_cls(message)
    return None
