"""Script to run the application in the local configuration."""

import os

import uvicorn


def main() -> None:
    """Run the server with reload against a local PostgreSQL and Ollama."""
    os.environ.setdefault("APP_ENV", "development")
    uvicorn.run("dinner_decider.main:app", host="127.0.0.1", port=8080, reload=True)


if __name__ == "__main__":
    main()
