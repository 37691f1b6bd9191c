"""
Test fixtures and sample data for quiz answers relay tests.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from quiz_answers.models import Config, QuestionAnswer


class TestFixtures:
    """Centralized test fixtures for all test modules."""

    @staticmethod
    def create_question(
        question_id: str,
        query: str,
        options: List[str],
        answer: Any
    ) -> Dict[str, Any]:
        """Create one raw question entry in the quiz page shape."""
        return {
            "id": question_id,
            "structure": {
                "query": {"text": query},
                "answer": answer,
                "options": [
                    {"id": f"{question_id}-opt{i}", "text": text}
                    for i, text in enumerate(options)
                ]
            }
        }

    @staticmethod
    def create_quiz_document(questions: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Wrap raw question entries in the data.quiz.info envelope."""
        return {"data": {"quiz": {"info": {"questions": questions}}}}

    @staticmethod
    def create_sample_quiz_document() -> Dict[str, Any]:
        """Two questions, deliberately out of id order."""
        return TestFixtures.create_quiz_document([
            TestFixtures.create_question("b", "Capital of <b>France</b>?", ["Paris", "London"], 0),
            TestFixtures.create_question("a", "1+2=?", ["3", "4"], 1),
        ])

    @staticmethod
    def create_sample_quiz_bytes() -> bytes:
        return json.dumps(TestFixtures.create_sample_quiz_document()).encode("utf-8")

    @staticmethod
    def expected_sample_message() -> str:
        return (
            "1. **1+2=?**\n**Answer:** `4`\n\n"
            "2. **Capital of France?**\n**Answer:** `Paris`\n\n"
        )

    @staticmethod
    def create_sample_records() -> List[QuestionAnswer]:
        return [
            QuestionAnswer(id="q3", question="Third?", answer="C", answer_index=2),
            QuestionAnswer(id="q1", question="First?", answer="A", answer_index=0),
            QuestionAnswer(id="q2", question="Second?", answer="B", answer_index=1),
        ]

    @staticmethod
    def create_config_dict(**overrides) -> Dict[str, Any]:
        config = {
            "quiz_id": "5f1a2b3c4d",
            "webhook_url": "https://discord.com/api/webhooks/123/secret-token",
            "webhook_name": "Quiz Bot",
            "profile_url": "https://example.com/avatar.png"
        }
        config.update(overrides)
        return config

    @staticmethod
    def create_config(**overrides) -> Config:
        values = {
            "quiz_id": "5f1a2b3c4d",
            "webhook_url": "https://discord.com/api/webhooks/123/secret-token",
            "webhook_name": "Quiz Bot",
            "profile_url": "https://example.com/avatar.png",
            "quiz_base_url": "https://quiz.test"
        }
        values.update(overrides)
        return Config(**values)

    @staticmethod
    def write_config_file(temp_dir: str, content: Any, name: str = "config.json") -> Path:
        """Write a config file; strings are written verbatim, anything else as JSON."""
        path = Path(temp_dir) / name
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)
        return path


class FailingStream(httpx.SyncByteStream):
    """Response stream that fails part way through the body."""

    def __iter__(self):
        yield b'{"data": '
        raise httpx.ReadError("connection reset while reading")


class RecordingTransport:
    """
    Builds an httpx.MockTransport that records requests and replies from a handler.
    """

    def __init__(self, status_code: int = 200, content: bytes = b"", exception: Optional[Exception] = None):
        self.status_code = status_code
        self.content = content
        self.exception = exception
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        return httpx.Response(self.status_code, content=self.content)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))
