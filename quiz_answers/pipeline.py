"""
Runs the fetch -> parse -> format -> notify sequence for one quiz.
"""
import logging
from typing import Optional

from .answer_formatter import format_answers
from .errors import NotifyError, QuizAnswersError
from .models import Config
from .notifier import WebhookNotifier
from .quiz_fetcher import QuizFetcher
from .quiz_parser import QuizParser

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class AnswerPipeline:
    """
    Orchestrates a single run of the relay.

    Each stage consumes the previous stage's output. The first failing stage
    ends the run; later stages are not invoked.
    """

    def __init__(
        self,
        config: Config,
        fetcher: Optional[QuizFetcher] = None,
        parser: Optional[QuizParser] = None,
        notifier: Optional[WebhookNotifier] = None
    ):
        """
        Initialize the pipeline.

        Args:
            config: Run configuration
            fetcher: Quiz fetcher, built from config if None
            parser: Quiz parser, default if None
            notifier: Webhook notifier, built from config if None
        """
        self.logger = logging.getLogger(__name__)
        self.config = config
        self.fetcher = fetcher or QuizFetcher(
            base_url=config.quiz_base_url,
            timeout=config.request_timeout
        )
        self.parser = parser or QuizParser()
        self.notifier = notifier or WebhookNotifier(
            webhook_url=config.webhook_url,
            username=config.webhook_name,
            avatar_url=config.profile_url,
            timeout=config.request_timeout
        )

    def build_message(self) -> str:
        """
        Fetch and parse the quiz, then format its answers.

        Raises:
            FetchError, DecodeError, AnswerIndexError
        """
        raw = self.fetcher.fetch(self.config.quiz_id)
        records = self.parser.parse(raw)
        return format_answers(records)

    def notify(self, message: str) -> None:
        """
        Deliver the message.

        Raises:
            NotifyError: If the webhook delivery did not succeed
        """
        result = self.notifier.send(message)
        if not result.success:
            raise NotifyError(result.error or "Sending message to Discord failed")

    def run(self) -> int:
        """
        Execute the full pipeline.

        Returns:
            Process exit code: 0 on success, 1 if any stage failed
        """
        try:
            message = self.build_message()
            self.notify(message)
        except QuizAnswersError as e:
            self.logger.error(f"Run for quiz {self.config.quiz_id} failed: {e}")
            return EXIT_FAILURE

        self.logger.info(f"Run for quiz {self.config.quiz_id} completed")
        return EXIT_SUCCESS
