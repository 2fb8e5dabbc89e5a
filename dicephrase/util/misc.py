UINT32_MAX = 2**32 - 1


def format_error(e: Exception):
    if str(e):
        return f"{type(e).__name__}: {e}"
    else:
        return type(e).__name__


def parse_uint32(value: str) -> int:
    """
    Parse a base 10 unsigned 32 bit integer.

    Stricter than int(): signs, whitespace, underscores and non-ASCII digits are rejected.
    """
    if not value or not value.isascii() or not value.isdigit():
        raise ValueError(f"{value!r} is not an unsigned integer")
    number = int(value)
    if number > UINT32_MAX:
        raise ValueError(f"{value!r} is out of range for a 32 bit unsigned integer")
    return number
