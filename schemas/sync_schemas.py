"""
RecipeGen Sync Schemas
Wire format of the pull/push synchronization protocol
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.recipe_schemas import Recipe
from utils.date_utils import MAX_EPOCH_MS, MIN_EPOCH_MS


class SyncStatus(str, Enum):
    """Pending mutation kind recorded by the client"""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


class RecipeChange(BaseModel):
    """
    A single pending client-side mutation

    `id` is the client's id for the record (an integer for records the server
    already knows, or a locally generated string); `remote_id` carries the
    server id as a string. `user_id` and `updated_at` are accepted but never
    trusted.
    An unknown or missing `sync_status` leaves the change untagged.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    remote_id: Optional[str] = None
    title: str = ""
    description: str = ""
    ingredients: str = ""
    steps: str = ""
    cooking_time: str = ""
    updated_at: Optional[Union[datetime, int]] = None
    sync_status: Optional[SyncStatus] = None
    user_id: Optional[int] = None

    @field_validator("sync_status", mode="before")
    @classmethod
    def unknown_status_is_none(cls, v):
        # Unrecognized tags are skipped by the sync service, not rejected with the batch
        try:
            return SyncStatus(v)
        except ValueError:
            return None

    def server_id(self) -> Optional[int]:
        """Resolve the authoritative recipe id this change refers to, if any"""
        if isinstance(self.id, int):
            return self.id
        for candidate in (self.id, self.remote_id):
            if isinstance(candidate, str) and candidate.strip().isdigit():
                return int(candidate.strip())
        return None


class PullRequest(BaseModel):
    last_pulled_at: Optional[int] = Field(
        default=None, alias="lastPulledAt", ge=MIN_EPOCH_MS, le=MAX_EPOCH_MS
    )


class PullChanges(BaseModel):
    recipes: List[Recipe] = []
    users: List[Any] = []
    tokens: List[Any] = []
    app_state: List[Any] = []


class PullResponse(BaseModel):
    changes: PullChanges
    timestamp: int


class PushChanges(BaseModel):
    model_config = ConfigDict(extra="ignore")

    recipes: List[RecipeChange] = []


class PushRequest(BaseModel):
    changes: PushChanges = Field(default_factory=PushChanges)
    last_pulled_at: Optional[int] = Field(
        default=None, alias="lastPulledAt", ge=MIN_EPOCH_MS, le=MAX_EPOCH_MS
    )
    is_logout: bool = False
