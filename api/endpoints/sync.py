"""
RecipeGen Sync Endpoints
Pull/push protocol for offline-capable clients
"""

from fastapi import APIRouter, Depends, Response, status

from core.dependencies import CurrentUserId, get_sync_service
from schemas.sync_schemas import PullRequest, PullResponse, PushRequest
from services.sync_service import SyncService

router = APIRouter(prefix="/sync")


@router.post("/pull", response_model=PullResponse)
def pull_changes(
    request: PullRequest,
    user_id: CurrentUserId,
    service: SyncService = Depends(get_sync_service),
):
    """
    Send the caller's recipes changed since lastPulledAt

    The returned timestamp is the client's next lastPulledAt.
    """
    return service.pull(user_id, request.last_pulled_at)


@router.post("/push", status_code=status.HTTP_204_NO_CONTENT)
def push_changes(
    request: PushRequest,
    user_id: CurrentUserId,
    service: SyncService = Depends(get_sync_service),
):
    """
    Apply the client's created/updated/deleted recipes

    With is_logout set, every active recipe of the caller is soft-deleted
    instead and the changes are ignored.
    """
    service.push(user_id, request.changes.recipes, is_logout=request.is_logout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
