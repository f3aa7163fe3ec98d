"""Analytics routes."""

from fastapi import APIRouter, Depends

from ...engines.app import AppRoot, Tab
from ..deps import require_onboarded

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("")
async def get_analytics(app_root: AppRoot = Depends(require_onboarded)):
    """Streak history and completions per category."""
    await app_root.select_tab(Tab.ANALYTICS)
    return app_root.analytics.state.to_dict()
