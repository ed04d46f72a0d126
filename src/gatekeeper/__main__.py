"""Run the Gatekeeper API with uvicorn.

Usage:
    python -m gatekeeper
"""

import uvicorn

from gatekeeper_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "gatekeeper.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
