"""
jwt_service.api.__main__

Entrypoint for running the reference app via `python -m jwt_service.api`.

Responsibilities:
- Load and validate settings (fails fast on a missing trust mode).
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from jwt_service.api.app import create_app
from jwt_service.observability.logging import get_logger
from jwt_service.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    log.info(
        "serving",
        identifier=settings.identifier,
        trust_mode="open" if settings.open_trust else "allow_list",
        peers=sorted(settings.peers),
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()
