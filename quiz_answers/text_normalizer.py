"""
Markup cleanup for question and option text.
"""
import re

LINE_BREAK_TAG = "<br>"
NBSP_ENTITY = "&nbsp;"

_TAG_PATTERN = re.compile(r"<[^>]*>")


def remove_html_tags(text: str) -> str:
    """
    Convert quiz markup into plain text for a chat message.

    ``<br>`` becomes a newline, every other tag is dropped and ``&nbsp;``
    is removed outright. Other entities are left as they are.

    Args:
        text: Raw question or option text

    Returns:
        Plain text
    """
    text = text.replace(LINE_BREAK_TAG, "\n")
    text = _TAG_PATTERN.sub("", text)
    # removal can splice a new entity together, e.g. "&&nbsp;nbsp;"
    while NBSP_ENTITY in text:
        text = text.replace(NBSP_ENTITY, "")
    return text
