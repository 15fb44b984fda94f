"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from jobboard.repositories import BoardStore


def get_store(request: Request) -> BoardStore:
    """Store handle opened in the application lifespan."""
    return request.app.state.store
