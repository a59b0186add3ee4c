"""Entry point for running the example server.

Configure via environment variables:

    RESP_LOCALE_DIR
        Directory holding ``<locale>.json`` bundles (default: "./localize").

    RESP_DEFAULT_LOCALE
        Locale used when the client does not pick one, and the fallback for
        missing translations (default: "en").

    RESP_LANGUAGES
        Comma-separated locales a client may pick with ``?lang=``
        (default: "th,en").  Must include RESP_DEFAULT_LOCALE.

    RESP_HOST
        Bind address (default: "0.0.0.0").

    RESP_PORT
        Bind port (default: 3000).

Usage::

    RESP_LOCALE_DIR=./localize python -m starlette_resp
"""

from __future__ import annotations

import logging
import os
import sys

import uvicorn

from starlette_resp.localization import Localizer
from starlette_resp.server import create_app

logger = logging.getLogger("starlette_resp")


def _load_list_env(name: str, default: str) -> list[str]:
    """Load a comma-separated environment variable, dropping blanks."""
    raw = os.environ.get(name, default)
    values = [part.strip() for part in raw.split(",") if part.strip()]
    if not values:
        logger.error("%s must list at least one value", name)
        sys.exit(1)
    return values


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    locale_dir = os.environ.get("RESP_LOCALE_DIR", "./localize")
    if not os.path.isdir(locale_dir):
        logger.error("RESP_LOCALE_DIR %s is not a directory", locale_dir)
        sys.exit(1)

    default_locale = os.environ.get("RESP_DEFAULT_LOCALE", "en")
    languages = _load_list_env("RESP_LANGUAGES", "th,en")
    if default_locale not in languages:
        logger.error("RESP_LANGUAGES %s must include RESP_DEFAULT_LOCALE %s", languages, default_locale)
        sys.exit(1)

    host = os.environ.get("RESP_HOST", "0.0.0.0")
    port_raw = os.environ.get("RESP_PORT", "3000")
    try:
        port = int(port_raw)
    except ValueError:
        logger.error("Invalid RESP_PORT value: %s (must be an integer)", port_raw)
        sys.exit(1)

    localizer = Localizer(locale_dir, default_locale=default_locale)
    app = create_app(localizer, languages=languages)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
