"""FastAPI dependencies for the reference check backend."""

from fastapi import Request

from ...application.services.check_service import CheckService


def get_check_service(request: Request) -> CheckService:
    """Get the check service bound to the running application."""
    return request.app.state.check_service
