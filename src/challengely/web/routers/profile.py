"""Profile and reminder routes."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...engines.app import AppRoot, Tab
from ...models.challenge import Category, Difficulty
from ...models.notifications import NotificationFrequency, parse_time
from ..deps import refuse, require_onboarded

router = APIRouter(prefix="/profile", tags=["profile"])


class PreferencesRequest(BaseModel):
    interests: list[Category] | None = None
    difficulty: Difficulty | None = None


class NotificationsRequest(BaseModel):
    enabled: bool | None = None
    time: str | None = Field(default=None, description="HH:MM")
    frequency: NotificationFrequency | None = None
    weekday: int | None = Field(default=None, ge=1, le=7)


@router.get("")
async def get_profile(app_root: AppRoot = Depends(require_onboarded)):
    """Stored profile and reminder settings."""
    await app_root.select_tab(Tab.PROFILE)
    return app_root.profile.state.to_dict()


@router.put("/preferences")
async def update_preferences(
    body: PreferencesRequest, app_root: AppRoot = Depends(require_onboarded)
):
    """Change interests or difficulty."""
    await app_root.profile.update_preferences(
        interests=set(body.interests) if body.interests is not None else None,
        difficulty=body.difficulty,
    )
    return app_root.profile.state.to_dict()


@router.put("/notifications")
async def update_notifications(
    body: NotificationsRequest, app_root: AppRoot = Depends(require_onboarded)
):
    """Change the reminder schedule and reschedule it."""
    reminder_time = None
    if body.time is not None:
        try:
            reminder_time = parse_time(body.time)
        except ValueError:
            raise HTTPException(status_code=422, detail=f"Invalid time '{body.time}'")

    engine = app_root.profile
    await engine.load()
    ok = True
    if body.weekday is not None:
        ok = await engine.set_weekday(body.weekday) and ok
    if body.frequency is not None:
        ok = await engine.set_frequency(body.frequency) and ok
    if reminder_time is not None:
        ok = await engine.set_time(reminder_time) and ok
    if body.enabled is not None:
        ok = await engine.toggle_notifications(body.enabled) and ok

    if not ok:
        raise refuse(engine.state.error_message or "Could not schedule the reminder")
    return engine.state.to_dict()


@router.post("/notifications/test")
async def send_test_notification(app_root: AppRoot = Depends(require_onboarded)):
    """Schedule a test notification one minute from now."""
    engine = app_root.profile
    await engine.load()
    if not engine.state.notifications.enabled:
        raise refuse("Notifications are disabled")
    if not await engine.send_test():
        raise refuse(engine.state.error_message)
    return engine.state.to_dict()
