"""
String utilities
"""

from constants.patents import ELLIPSIS


def truncate(value: str, max_length: int, suffix: str = ELLIPSIS) -> str:
    """
    Truncates a string to max_length chars, appending suffix if anything was cut

    Example:
    ```
    truncate("International Business Machines", 20) -> "International Busine..."
    truncate("IBM", 20) -> "IBM"
    ```

    Args:
        value (str): string to truncate
        max_length (int): max number of chars kept (suffix not counted)
        suffix (str, optional): marker appended when truncated. Defaults to ELLIPSIS.
    """
    if len(value) <= max_length:
        return value
    return value[:max_length] + suffix


def is_blank(value: str | None) -> bool:
    """
    True if value is None, empty or whitespace-only
    """
    return value is None or len(value.strip()) == 0
