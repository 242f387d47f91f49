"""
Common UI functions
"""
from typing import Optional
import logging

from typings.patents import NameDescription


def get_markdown_link(url: str, text: Optional[str] = None):
    """
    Get markdown link

    Args:
        url (str): url
        text (str, optional): link text. Defaults to None.

    Returns:
        str: markdown link
    """
    return f"[{text or url}]({url})"


def get_horizontal_list(items: list[str], limit: Optional[int] = None) -> str:
    """
    Format a list of strings as a horizontal list (markdown representation)

    Args:
        items (list[str]): list of strings
        limit (int, optional): max items shown; the rest are summarized as "+N more". Defaults to None.

    Returns:
        str: markdown representation of horizontal list
    """
    if len(items) == 0:
        logging.debug("No items to format as horizontal list")
        return ""

    shown = items[:limit] if limit is not None else items
    md_list = " ".join([f"`{item}`" for item in shown])

    if len(items) > len(shown):
        md_list += f" _+{len(items) - len(shown)} more_"

    return md_list


def get_name_description_list(pairs: list[NameDescription]) -> str:
    """
    Format name/description pairs as a markdown bullet list

    Example:
    ```
    - **OLED**: organic light emitting diode
    - **Hinge**
    ```
    """
    return "\n".join(
        [
            f"- **{pair.name}**: {pair.description}"
            if pair.description
            else f"- **{pair.name}**"
            for pair in pairs
        ]
    )


def or_na(value: Optional[str]) -> str:
    """
    Display value for possibly-empty fields
    """
    return value if value else "N/A"
