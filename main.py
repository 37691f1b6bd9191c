#!/usr/bin/env python3
"""
Quiz Answers Relay - Main Entry Point

Fetches the answers of a quiz and posts them to a Discord webhook.

Usage:
    python main.py [config_path]

Configuration (config.json by default):
    quiz_id:      Quiz to fetch
    webhook_url:  Discord webhook to post to
    webhook_name: Display name of the message
    profile_url:  Avatar URL of the message
    Optional: request_timeout, quiz_base_url, logging.level, logging.log_directory
"""

import sys
import logging
from pathlib import Path

from quiz_answers.config_manager import ConfigManager
from quiz_answers.errors import ConfigLoadError
from quiz_answers.models import Config
from quiz_answers.pipeline import AnswerPipeline, EXIT_FAILURE

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger("quiz_answers")


def setup_logging_from_config(config: Config):
    """Set up logging based on configuration."""
    log_level = getattr(logging, config.log_level.upper())
    handlers = [logging.StreamHandler()]

    if config.log_directory:
        log_directory = Path(config.log_directory)
        log_directory.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_directory / "quiz_answers.log", encoding='utf-8'))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)

    # Reduce httpx request noise
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)


def main(argv=None) -> int:
    """Load configuration and run the relay once."""
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else ConfigManager.DEFAULT_CONFIG_PATH

    # Console logging until the config says otherwise
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    config_manager = ConfigManager()
    try:
        config = config_manager.load_config(config_path)
    except ConfigLoadError as e:
        logger.error(f"Error loading config: {e}")
        return EXIT_FAILURE

    try:
        setup_logging_from_config(config)
    except OSError as e:
        logger.error(f"Error setting up log file in {config.log_directory}: {e}")
        return EXIT_FAILURE

    logger.info(config_manager.get_settings_summary(config))

    return AnswerPipeline(config).run()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nStopped by user")
        sys.exit(EXIT_FAILURE)
