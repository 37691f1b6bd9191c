"""
Parser turning a quiz page response into question/answer records.
"""
import json
import logging
from typing import List, Union

from .errors import AnswerIndexError, DecodeError
from .models import QuestionAnswer, QuizDocument, QuizQuestion
from .text_normalizer import remove_html_tags


class QuizParser:
    """Decodes quiz page JSON and resolves the correct option of every question."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def decode_document(self, raw: Union[bytes, str]) -> QuizDocument:
        """
        Decode raw response content into the typed document model.

        Args:
            raw: Response body as returned by the quiz page

        Returns:
            QuizDocument

        Raises:
            DecodeError: If the content is not JSON or does not have the quiz page shape
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.error(f"Error unmarshaling JSON: {e}")
            raise DecodeError(f"Unmarshaling JSON failed: {e}") from e

        try:
            return QuizDocument.from_dict(data)
        except KeyError as e:
            self.logger.error(f"Error unmarshaling JSON: missing field {e}")
            raise DecodeError(f"Unmarshaling JSON failed: missing field {e}") from e
        except TypeError as e:
            self.logger.error(f"Error unmarshaling JSON: {e}")
            raise DecodeError(f"Unmarshaling JSON failed: {e}") from e

    def resolve_answer(self, question: QuizQuestion) -> QuestionAnswer:
        """
        Build the normalized record for a single question.

        Raises:
            AnswerIndexError: If the answer index does not select an option
        """
        structure = question.structure
        index = structure.answer
        if not 0 <= index < len(structure.options):
            raise AnswerIndexError(question.id, index, len(structure.options))

        return QuestionAnswer(
            id=question.id,
            question=remove_html_tags(structure.query.text),
            answer=remove_html_tags(structure.options[index].text),
            answer_index=index,
        )

    def parse(self, raw: Union[bytes, str]) -> List[QuestionAnswer]:
        """
        Parse a quiz page into one record per question, in upstream order.

        Duplicate question ids are kept.

        Args:
            raw: Response body as returned by the quiz page

        Returns:
            List of QuestionAnswer records

        Raises:
            DecodeError: If the document cannot be decoded
            AnswerIndexError: If any question's answer index is out of bounds
        """
        document = self.decode_document(raw)
        records = []
        for question in document.questions:
            try:
                records.append(self.resolve_answer(question))
            except AnswerIndexError as e:
                self.logger.error(f"Inconsistent quiz data: {e}")
                raise

        self.logger.info(f"Parsed {len(records)} questions")
        return records
