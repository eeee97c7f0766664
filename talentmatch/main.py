"""
TalentMatch Main Entry Point

Starts the HTTP matching service under uvicorn.
"""

import sys
from typing import Optional

import uvicorn


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: Optional[bool] = None,
) -> None:
    """Serve the FastAPI app, falling back to API_* settings for unset options."""
    from talentmatch.utils.config import get_settings
    from talentmatch.utils.logger import log, setup_logging

    setup_logging()
    settings = get_settings()

    host = host or settings.api.host
    port = port or settings.api.port
    reload = settings.api.reload if reload is None else reload

    log.info(f"Environment: {settings.environment}")
    log.info(f"Serving {settings.name} on {host}:{port}")

    uvicorn.run(
        "talentmatch.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.logging.level.lower(),
    )


def main() -> int:
    """
    Main entry point for the TalentMatch service.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        run_server()
        return 0
    except KeyboardInterrupt:
        print("\nServer interrupted by user.")
        return 130
    except Exception as e:
        print(f"Fatal error: {e}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
