"""Chat assistant routes."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...engines.app import AppRoot, Tab
from ...engines.chat import QUICK_REPLIES
from ..deps import refuse, require_onboarded

router = APIRouter(prefix="/chat", tags=["chat"])


class MessageRequest(BaseModel):
    text: str


async def _active(app_root: AppRoot) -> AppRoot:
    if not app_root.chat.state.messages:
        await app_root.select_tab(Tab.CHAT)
    return app_root


@router.get("")
async def get_chat(app_root: AppRoot = Depends(require_onboarded)):
    """Message log and quick replies."""
    await _active(app_root)
    return {**app_root.chat.state.to_dict(), "quick_replies": list(QUICK_REPLIES)}


@router.post("/messages")
async def send_message(body: MessageRequest, app_root: AppRoot = Depends(require_onboarded)):
    """Send a message; the reply arrives after a short delay."""
    await _active(app_root)
    app_root.chat.input_changed(body.text)
    if not await app_root.chat.send():
        raise HTTPException(status_code=422, detail="Message is empty")
    return app_root.chat.state.to_dict()


@router.post("/quick/{index}")
async def quick_reply(index: int, app_root: AppRoot = Depends(require_onboarded)):
    """Send one of the canned quick replies, numbered from 1."""
    if not 1 <= index <= len(QUICK_REPLIES):
        raise HTTPException(status_code=404, detail="Quick reply not found")
    await _active(app_root)
    await app_root.chat.quick_reply(QUICK_REPLIES[index - 1])
    return app_root.chat.state.to_dict()


@router.post("/stop")
async def stop_typing(app_root: AppRoot = Depends(require_onboarded)):
    """Drop any pending reply."""
    if not app_root.chat.state.is_typing:
        raise refuse("Assistant is not typing")
    await app_root.chat.stop_typing()
    return app_root.chat.state.to_dict()
