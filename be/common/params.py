from flask import request

from common.errors import InvalidInput

# largest value a BIGINT / SQLite INTEGER column can hold
MAX_ID = 2 ** 63 - 1


def json_body():
    """Return the request's JSON object, rejecting arrays, scalars and junk."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def parse_id(raw, label="ID"):
    """Parse a positive integer id taken from the URL or a JSON body."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        value = int(raw)
    else:
        raise InvalidInput(f"Invalid {label}")
    if value <= 0 or value > MAX_ID:
        raise InvalidInput(f"Invalid {label}")
    return value


def require_text(value, label):
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput(f"{label} is required")
    return value.strip()
