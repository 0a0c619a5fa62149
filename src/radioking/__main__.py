"""``python -m radioking`` – serve the HTTP API and run the play-event consumer."""
from __future__ import annotations

import sys

import uvicorn

from radioking.bootstrap import build_container, create_app
from radioking.config import ConfigError, load_settings
from radioking.observability.logging import JsonLoggerFactory, get_logger


def main() -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"radioking: {exc}", file=sys.stderr)
        return 2

    JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)
    log = get_logger(__name__)
    log.info(
        "app.starting",
        host=settings.server_host,
        port=settings.server_port,
        auth_enabled=settings.auth_enabled,
    )

    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
