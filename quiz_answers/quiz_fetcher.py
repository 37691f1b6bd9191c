"""
Retrieves quiz pages from the quiz platform.
"""
import logging
from typing import Optional

import httpx

from .errors import FetchError
from .http_client import REQUEST_ERRORS, client_context


class QuizFetcher:
    """Fetches the public quiz page of a quiz."""

    DEFAULT_BASE_URL = "https://quizizz.com"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None
    ):
        """
        Initialize the fetcher.

        Args:
            base_url: Quiz platform host, without trailing path
            timeout: Request timeout in seconds
            client: Optional shared client; one is created per fetch otherwise
        """
        self.logger = logging.getLogger(__name__)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client

    def build_url(self, quiz_id: str) -> str:
        return f"{self.base_url}/quiz/{quiz_id}"

    def fetch(self, quiz_id: str) -> bytes:
        """
        Download the raw quiz page body.

        Args:
            quiz_id: Quiz identifier

        Returns:
            Response body bytes

        Raises:
            FetchError: On network failure, body read failure or an error status
        """
        url = self.build_url(quiz_id)
        self.logger.info(f"Fetching quiz {quiz_id} from {url}")

        try:
            with client_context(self.client) as client:
                with client.stream("GET", url, timeout=self.timeout) as response:
                    try:
                        body = response.read()
                    except httpx.HTTPError as e:
                        self.logger.error(f"Error reading response body: {e}")
                        raise FetchError(f"Reading response body failed: {e}") from e
        except REQUEST_ERRORS as e:
            self.logger.error(f"Error fetching data: {e}")
            raise FetchError(f"Fetching data failed: {e}") from e

        if response.is_error:
            self.logger.error(
                f"Quiz page returned HTTP {response.status_code} for quiz {quiz_id}"
            )
            raise FetchError(
                f"Fetching data failed: HTTP {response.status_code}",
                status_code=response.status_code
            )

        self.logger.debug(f"Received {len(body)} bytes for quiz {quiz_id}")
        return body
