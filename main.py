#!/usr/bin/env python3
"""Main entry point for the idforge service.

This module initializes all components and starts the HTTP server.
"""

import logging
import sys
from pathlib import Path

from idforge.app import run_server
from idforge.cache import AlphabetCache
from idforge.config import Config, ConfigError
from idforge.random_source import default_random_source

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

# Alphabets requested over HTTP are client-controlled; bound what we keep
CACHE_MAX_ENTRIES = 1024


def main():
    """Main entry point for the application."""
    logger.info("Starting idforge service...")

    try:
        # Load configuration from environment variables and config file
        logger.info("Loading configuration...")
        config_file = "config.toml" if Path("config.toml").exists() else None
        config = Config.from_env_and_file(config_file)
        logger.info(f"Configuration loaded: {config}")

        # Initialize the process-wide random source
        logger.info("Initializing random source...")
        random_source = default_random_source()
        logger.info(f"Random source initialized: {random_source!r}")

        # Initialize the alphabet cache and warm it with the default alphabet
        logger.info("Initializing alphabet cache...")
        cache = AlphabetCache(max_entries=CACHE_MAX_ENTRIES)
        cache.get_or_validate(config.default_alphabet).unwrap()
        logger.info("Alphabet cache initialized")

        logger.info(f"Starting HTTP server on port {config.listen_port}...")
        logger.info("Service is ready to accept requests")

        run_server(config, cache, random_source)

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        logger.error("Please check your configuration and try again")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unexpected error during startup: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
