"""
Renders question/answer records into the chat message body.
"""
from typing import Iterable, List

from .models import QuestionAnswer

ENTRY_TEMPLATE = "{number}. **{question}**\n**Answer:** `{answer}`\n\n"


def sort_answers(records: Iterable[QuestionAnswer]) -> List[QuestionAnswer]:
    """Sort records by id, ascending. Equal ids keep their input order."""
    return sorted(records, key=lambda record: record.id)


def format_answers(records: Iterable[QuestionAnswer]) -> str:
    """
    Render records as a numbered list, sorted by question id.

    Args:
        records: Parsed question/answer records

    Returns:
        Message text, or an empty string when there are no records
    """
    return "".join(
        ENTRY_TEMPLATE.format(number=number, question=record.question, answer=record.answer)
        for number, record in enumerate(sort_answers(records), start=1)
    )
