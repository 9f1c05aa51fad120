"""Top-level FastAPI entrypoint for ``uvicorn dad_jokes:app``."""

from dad_jokes_skill.api_factory import create_app

app = create_app()


__all__ = ["app", "create_app"]
