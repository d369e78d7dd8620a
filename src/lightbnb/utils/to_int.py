def to_int(value: object, default: int | None = None) -> int | None:
    """Coerce an environment-style value to an integer.

    Args:
        value: Value to coerce. Strings are stripped first.
        default: Returned when the value is missing or not an integer.

    Returns:
        Integer value or ``default``.
    """

    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default
