# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Uvicorn entry point for the API server.

Example:
    $ nid-douillet-api
    $ API_PORT=8080 nid-douillet-api
"""

import uvicorn

from src.core.config import get_settings


def run() -> None:
    """Serve the API with the host, port and worker settings from API_*."""
    settings = get_settings()

    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host=settings.api.host,
        port=settings.api.port,
        workers=1 if settings.api.reload else settings.api.workers,
        reload=settings.api.reload,
        log_level=settings.log_level.lower(),
    )
