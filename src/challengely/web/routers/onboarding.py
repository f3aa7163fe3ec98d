"""Onboarding wizard routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...engines.app import AppRoot
from ...models.challenge import Category, Difficulty
from ..deps import get_app_root, refuse, require_not_onboarded

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


class DifficultyRequest(BaseModel):
    difficulty: Difficulty


def _state(app_root: AppRoot) -> dict:
    return app_root.onboarding.state.to_dict()


@router.get("")
async def get_onboarding(app_root: AppRoot = Depends(get_app_root)):
    """Current wizard step and selections."""
    return _state(app_root)


@router.post("/next")
async def next_step(app_root: AppRoot = Depends(require_not_onboarded)):
    """Advance the wizard, finishing from the last step."""
    if not await app_root.onboarding.next():
        raise refuse("Cannot proceed from this step")
    return _state(app_root)


@router.post("/previous")
async def previous_step(app_root: AppRoot = Depends(require_not_onboarded)):
    """Go back one step."""
    if not await app_root.onboarding.previous():
        raise refuse("Already at the first step")
    return _state(app_root)


@router.post("/skip")
async def skip(app_root: AppRoot = Depends(require_not_onboarded)):
    """Select every interest and finish."""
    await app_root.onboarding.skip()
    return _state(app_root)


@router.post("/interests/{category}")
async def toggle_interest(
    category: Category, app_root: AppRoot = Depends(require_not_onboarded)
):
    """Toggle one interest category."""
    await app_root.onboarding.toggle_interest(category)
    return _state(app_root)


@router.put("/difficulty")
async def set_difficulty(
    body: DifficultyRequest, app_root: AppRoot = Depends(require_not_onboarded)
):
    """Choose the preferred difficulty."""
    await app_root.onboarding.set_difficulty(body.difficulty)
    return _state(app_root)
