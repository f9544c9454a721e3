class InputError(ValueError):
    """Raised when the statistics text to parse is missing, empty or blank."""
