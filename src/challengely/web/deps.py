"""Request dependencies shared by the routers."""

from fastapi import HTTPException, Request

from ..engines.app import AppRoot


def get_app_root(request: Request) -> AppRoot:
    """Get the application root from app state."""
    return request.app.state.app_root


def require_onboarded(request: Request) -> AppRoot:
    """Get the application root, refusing requests before onboarding."""
    app_root = get_app_root(request)
    if not app_root.is_onboarding_complete:
        raise HTTPException(status_code=409, detail="Onboarding not completed")
    return app_root


def require_not_onboarded(request: Request) -> AppRoot:
    """Get the application root, refusing requests once onboarding is done."""
    app_root = get_app_root(request)
    if app_root.is_onboarding_complete:
        raise HTTPException(status_code=409, detail="Onboarding already completed")
    return app_root


def refuse(detail: str) -> HTTPException:
    """Build the error for a transition the current state does not allow."""
    return HTTPException(status_code=409, detail=detail)
