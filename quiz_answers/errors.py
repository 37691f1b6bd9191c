"""
Exception types raised by the quiz answers pipeline.
"""
from typing import Optional


class QuizAnswersError(Exception):
    """Base exception for quiz answers pipeline errors."""
    pass


class ConfigLoadError(QuizAnswersError):
    """Raised when the config file is missing, unreadable or invalid."""
    pass


class FetchError(QuizAnswersError):
    """Raised when the quiz page cannot be retrieved."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(QuizAnswersError):
    """Raised when the quiz page is not valid JSON or has an unexpected shape."""
    pass


class AnswerIndexError(QuizAnswersError):
    """Raised when a question's answer index does not select one of its options."""

    def __init__(self, question_id: str, answer_index: int, option_count: int):
        super().__init__(
            f"Question {question_id!r} has answer index {answer_index} "
            f"but only {option_count} option(s)"
        )
        self.question_id = question_id
        self.answer_index = answer_index
        self.option_count = option_count


class NotifyError(QuizAnswersError):
    """Raised when the answers could not be delivered to the webhook."""
    pass
