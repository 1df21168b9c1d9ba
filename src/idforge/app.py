"""Flask HTTP server for the idforge service.

This module exposes identifier generation and alphabet validation over HTTP.
"""

import logging
from typing import Optional

from flask import Flask, Response, jsonify, request

from idforge.alphabet import validate_alphabet
from idforge.alphabets import resolve_preset
from idforge.cache import AlphabetCache
from idforge.config import Config
from idforge.errors import Err, RandomGenerationError
from idforge.id_generator import generate
from idforge.random_source import RandomSource
from idforge.sampler import mask_for

# Configure logging
logger = logging.getLogger(__name__)


def create_app(
    config: Config,
    cache: AlphabetCache,
    random_source: RandomSource,
) -> Flask:
    """Create and configure Flask application.

    Args:
        config: Configuration instance
        cache: Alphabet cache shared by all requests
        random_source: Random byte source shared by all requests

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    def _text(body: str, status: int) -> Response:
        return Response(f"{body}\n", status=status, mimetype="text/plain")

    def _parse_int(name: str, default: int) -> Optional[int]:
        raw = request.args.get(name)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError:
            return None

    @app.route("/", methods=["GET"])
    def health_check():
        """Health check endpoint.

        GET / - Health check

        Returns:
            200: OK
        """
        return _text("OK", 200)

    @app.route("/id", methods=["GET"])
    def generate_ids():
        """Generate one or more identifiers.

        GET /id?alphabet=<chars>&preset=<name>&size=<n>&count=<n>

        Returns:
            200: Identifiers, one per line
            400: Bad request (invalid alphabet, size or count)
            503: Service unavailable (random source failure)
        """
        preset = request.args.get("preset")
        if preset:
            alphabet = resolve_preset(preset)
            if alphabet is None:
                logger.info(f"Unknown preset requested: {preset}")
                return _text(f"Bad Request: Unknown preset {preset!r}", 400)
        else:
            alphabet = request.args.get("alphabet") or config.default_alphabet

        size = _parse_int("size", config.default_size)
        if size is None:
            return _text("Bad Request: size must be an integer", 400)

        count = _parse_int("count", 1)
        if count is None or not (1 <= count <= config.max_batch):
            return _text(
                f"Bad Request: count must be an integer between 1 and {config.max_batch}",
                400,
            )

        # The size ceiling bounds the whole response, not each identifier
        if count > 1 and count * size > config.max_size:
            logger.info(f"Rejected batch: {count} x {size} exceeds {config.max_size}")
            return _text(
                f"Bad Request: count * size must be at most {config.max_size}",
                400,
            )

        ids = []
        for _ in range(count):
            result = generate(
                alphabet,
                size,
                random_source=random_source,
                cache=cache,
                max_size=config.max_size,
            )
            if isinstance(result, Err):
                if isinstance(result.error, RandomGenerationError):
                    logger.error(f"Random source failure: {result.error}")
                    return _text(
                        "Service unavailable: Random source failure", 503
                    )
                logger.info(f"Rejected generation request: {result.error}")
                return _text(f"Bad Request: {result.error}", 400)
            ids.append(result.value)

        logger.debug(f"Generated {count} identifier(s) of size {size}")
        return Response(
            "".join(f"{id_}\n" for id_ in ids),
            status=200,
            mimetype="text/plain",
        )

    @app.route("/validate", methods=["POST"])
    def validate():
        """Validate an alphabet.

        POST /validate - request body is the raw alphabet (UTF-8)

        Returns:
            200: {"valid": true, "length": n, "mask": m}
            400: {"valid": false, "error": "..."}
        """
        try:
            raw = request.get_data(as_text=True)
        except Exception as e:
            logger.error(f"Failed to read request body: {e}")
            return jsonify(valid=False, error="Failed to read request body"), 400

        result = validate_alphabet(raw)
        if isinstance(result, Err):
            return jsonify(valid=False, error=str(result.error)), 400

        length = len(result.value)
        return jsonify(valid=True, length=length, mask=mask_for(length)), 200

    return app


def run_server(
    config: Config,
    cache: AlphabetCache,
    random_source: RandomSource,
) -> None:
    """Run the Flask HTTP server.

    Args:
        config: Configuration instance
        cache: Alphabet cache shared by all requests
        random_source: Random byte source shared by all requests
    """
    app = create_app(config, cache, random_source)

    logger.info(f"Starting HTTP server on all interfaces, port {config.listen_port}")
    app.run(host="0.0.0.0", port=config.listen_port, debug=False)  # nosec B104
