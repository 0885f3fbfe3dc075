"""Application entry point.

This module serves as the entry point for the FastAPI application.
It creates the application instance using the factory pattern.

Usage:
    # Development with auto-reload
    uvicorn dinner_decider.main:app --reload

    # Console script
    dinner-decider
"""

from dinner_decider.factory import create_app


# Create the application instance
app = create_app()


def run() -> None:
    """Run the application with uvicorn using the configured host and port."""
    import uvicorn

    from dinner_decider.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "dinner_decider.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
