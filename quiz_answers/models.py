"""
Core data models for the quiz answers relay.

The upstream quiz page is modeled one dataclass per nesting level:
document -> data -> quiz -> info -> questions[] -> structure -> query/options[].
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional


def _require_dict(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"'{path}' must be an object, got {type(value).__name__}")
    return value


def _require_list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise TypeError(f"'{path}' must be an array, got {type(value).__name__}")
    return value


def _optional_text(value: Any, path: str) -> str:
    # null text decodes to an empty string
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{path}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class QuestionOption:
    """A single selectable option of a question."""
    id: str
    text: str

    @classmethod
    def from_dict(cls, data: Any, path: str = "option") -> "QuestionOption":
        data = _require_dict(data, path)
        return cls(
            id=_optional_text(data.get("id"), f"{path}.id"),
            text=_optional_text(data.get("text"), f"{path}.text"),
        )


@dataclass
class QuestionQuery:
    """The prompt of a question."""
    text: str

    @classmethod
    def from_dict(cls, data: Any, path: str = "query") -> "QuestionQuery":
        data = _require_dict(data, path)
        return cls(text=_optional_text(data.get("text"), f"{path}.text"))


@dataclass
class QuestionStructure:
    """Query, options and the index of the correct option."""
    query: QuestionQuery
    answer: int
    options: List[QuestionOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "structure") -> "QuestionStructure":
        data = _require_dict(data, path)

        answer = data["answer"]
        # bool is an int subclass but never a valid index
        if isinstance(answer, bool) or not isinstance(answer, int):
            raise TypeError(
                f"'{path}.answer' must be an integer, got {type(answer).__name__}"
            )

        options = _require_list(data.get("options", []), f"{path}.options")
        return cls(
            query=QuestionQuery.from_dict(data["query"], f"{path}.query"),
            answer=answer,
            options=[
                QuestionOption.from_dict(option, f"{path}.options[{i}]")
                for i, option in enumerate(options)
            ],
        )


@dataclass
class QuizQuestion:
    """One question entry of a quiz."""
    id: str
    structure: QuestionStructure

    @classmethod
    def from_dict(cls, data: Any, path: str = "question") -> "QuizQuestion":
        data = _require_dict(data, path)
        question_id = data["id"]
        if not isinstance(question_id, str):
            raise TypeError(
                f"'{path}.id' must be a string, got {type(question_id).__name__}"
            )
        return cls(
            id=question_id,
            structure=QuestionStructure.from_dict(data["structure"], f"{path}.structure"),
        )


@dataclass
class QuizInfo:
    """Quiz metadata holding the question list."""
    questions: List[QuizQuestion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "info") -> "QuizInfo":
        data = _require_dict(data, path)
        questions = _require_list(data["questions"], f"{path}.questions")
        return cls(questions=[
            QuizQuestion.from_dict(question, f"{path}.questions[{i}]")
            for i, question in enumerate(questions)
        ])


@dataclass
class Quiz:
    """The quiz object of a quiz page."""
    info: QuizInfo

    @classmethod
    def from_dict(cls, data: Any, path: str = "quiz") -> "Quiz":
        data = _require_dict(data, path)
        return cls(info=QuizInfo.from_dict(data["info"], f"{path}.info"))


@dataclass
class QuizData:
    """The 'data' envelope of a quiz page response."""
    quiz: Quiz

    @classmethod
    def from_dict(cls, data: Any, path: str = "data") -> "QuizData":
        data = _require_dict(data, path)
        return cls(quiz=Quiz.from_dict(data["quiz"], f"{path}.quiz"))


@dataclass
class QuizDocument:
    """Top level of the quiz page JSON document."""
    data: QuizData

    @classmethod
    def from_dict(cls, data: Any) -> "QuizDocument":
        data = _require_dict(data, "document")
        return cls(data=QuizData.from_dict(data["data"], "data"))

    @property
    def questions(self) -> List[QuizQuestion]:
        return self.data.quiz.info.questions


@dataclass
class QuestionAnswer:
    """A question with its resolved, normalized answer."""
    id: str
    question: str
    answer: str
    answer_index: int


@dataclass(frozen=True)
class Config:
    """Run configuration loaded from the config file."""
    quiz_id: str
    webhook_url: str
    webhook_name: str = ""
    profile_url: str = ""
    request_timeout: float = 10.0
    quiz_base_url: str = "https://quizizz.com"
    log_level: str = "INFO"
    log_directory: Optional[str] = None


@dataclass
class DeliveryResult:
    """Outcome of a webhook delivery."""
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    response_body: Optional[str] = None
