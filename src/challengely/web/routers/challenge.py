"""Daily challenge routes."""

from fastapi import APIRouter, Depends

from ...engines.app import AppRoot, Tab
from ..deps import refuse, require_onboarded

router = APIRouter(prefix="/challenge", tags=["challenge"])


@router.get("")
async def get_challenge(app_root: AppRoot = Depends(require_onboarded)):
    """Today's challenge and countdown."""
    if app_root.challenge.state.todays_challenge is None:
        await app_root.select_tab(Tab.CHALLENGE)
    return app_root.challenge.state.to_dict()


@router.post("/refresh")
async def refresh(app_root: AppRoot = Depends(require_onboarded)):
    """Reload the profile and reselect today's challenge."""
    await app_root.select_tab(Tab.CHALLENGE)
    return app_root.challenge.state.to_dict()


@router.post("/reveal")
async def reveal(app_root: AppRoot = Depends(require_onboarded)):
    if not await app_root.challenge.reveal():
        raise refuse("Challenge is not locked")
    return app_root.challenge.state.to_dict()


@router.post("/accept")
async def accept(app_root: AppRoot = Depends(require_onboarded)):
    """Start the countdown."""
    if not await app_root.challenge.accept():
        raise refuse("Challenge has not been revealed")
    return app_root.challenge.state.to_dict()


@router.post("/complete")
async def complete(app_root: AppRoot = Depends(require_onboarded)):
    """Finish the running challenge and update the streak."""
    if not await app_root.challenge.complete():
        raise refuse("No challenge in progress")
    return app_root.challenge.state.to_dict()


@router.post("/share")
async def share(app_root: AppRoot = Depends(require_onboarded)):
    """Share card for today's challenge."""
    card = await app_root.challenge.share()
    if card is None:
        raise refuse("No challenge to share")
    return {
        "card": card.to_dict(),
        "text": card.render(),
        "session": app_root.challenge.state.to_dict(),
    }
