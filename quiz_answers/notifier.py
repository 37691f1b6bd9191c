"""
Delivers the formatted answers to a Discord webhook.
"""
import json
import logging
from typing import Any, Dict, Optional

import discord
import httpx

from .http_client import REQUEST_ERRORS, client_context
from .models import DeliveryResult

EMBED_TITLE = "Quiz Answers"
EMBED_COLOUR = discord.Colour.blue()
# Discord rejects embed descriptions longer than this
MAX_DESCRIPTION_LENGTH = 4096

SUCCESS_STATUS_CODES = (200, 204)


class WebhookNotifier:
    """Posts a single embed message to a webhook URL."""

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        webhook_url: str,
        username: str = "",
        avatar_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None
    ):
        """
        Initialize the notifier.

        Args:
            webhook_url: Webhook endpoint to post to
            username: Display name shown for the message
            avatar_url: Profile picture URL shown for the message
            timeout: Request timeout in seconds
            client: Optional shared client; one is created per send otherwise
        """
        self.logger = logging.getLogger(__name__)
        self.webhook_url = webhook_url
        self.username = username
        self.avatar_url = avatar_url
        self.timeout = timeout
        self.client = client

    def build_embed(self, message: str) -> discord.Embed:
        return discord.Embed(title=EMBED_TITLE, description=message, colour=EMBED_COLOUR)

    def build_payload(self, message: str) -> Dict[str, Any]:
        """
        Build the webhook JSON payload for a message.

        Args:
            message: Formatted answers text used as the embed description

        Returns:
            Payload dictionary with username, avatar_url and one embed
        """
        embed = self.build_embed(message)
        # to_dict() adds type/flags and drops an empty description
        return {
            "username": self.username,
            "avatar_url": self.avatar_url,
            "embeds": [{
                "title": embed.title,
                "description": message,
                "color": embed.colour.value,
            }],
        }

    def send(self, message: str) -> DeliveryResult:
        """
        Post the message to the webhook.

        Failures are logged and reported through the returned result rather than raised.

        Args:
            message: Formatted answers text

        Returns:
            DeliveryResult describing the outcome
        """
        if len(message) > MAX_DESCRIPTION_LENGTH:
            self.logger.warning(
                f"Message is {len(message)} characters, Discord may reject embeds "
                f"longer than {MAX_DESCRIPTION_LENGTH}"
            )

        try:
            payload_bytes = json.dumps(self.build_payload(message)).encode("utf-8")
        except (TypeError, ValueError) as e:
            self.logger.error(f"Error marshaling payload: {e}")
            return DeliveryResult(success=False, error=f"Marshaling payload failed: {e}")

        try:
            with client_context(self.client) as client:
                response = client.post(
                    self.webhook_url,
                    content=payload_bytes,
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout
                )
        except REQUEST_ERRORS as e:
            self.logger.error(f"Error sending message to Discord: {e}")
            return DeliveryResult(success=False, error=f"Sending message to Discord failed: {e}")

        if response.status_code not in SUCCESS_STATUS_CODES:
            body = response.text
            self.logger.error(
                f"Error sending message to Discord: {response.status_code} "
                f"{response.reason_phrase}\nResponse body: {body}"
            )
            return DeliveryResult(
                success=False,
                status_code=response.status_code,
                error=f"Webhook returned HTTP {response.status_code}",
                response_body=body
            )

        self.logger.info("Message sent to Discord successfully!")
        return DeliveryResult(success=True, status_code=response.status_code)
