"""
RecipeGen Sync Service
Reconciles an offline client's replica with the server using soft deletion
and last-write-wins timestamps.

Pull hands out every active recipe of the caller whose updated_at is strictly
after the client's lastPulledAt cursor, plus a fresh server timestamp to use
as the next cursor. Push applies the client's pending mutations in the order
given. Deletions are not propagated back to other replicas (no tombstones)
and created records are not echoed back with their server ids.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import structlog

from core.exceptions import InternalError
from middleware.logging import log_business_event
from models.recipe import Recipe
from schemas.sync_schemas import RecipeChange, SyncStatus
from utils.date_utils import from_epoch_ms, now_ms, utcnow

logger = structlog.get_logger()

# Client-editable columns carried by a RecipeChange
SYNCED_FIELDS = ("title", "description", "ingredients", "steps", "cooking_time")

# Entity kinds the client schema knows about besides recipes; reserved, always empty
RESERVED_COLLECTIONS = ("users", "tokens", "app_state")


class SyncService:
    def __init__(self, db: Session):
        self.db = db

    def pull(self, user_id: int, last_pulled_at: Optional[int]) -> Dict[str, Any]:
        """Return the caller's changes since the cursor and the next cursor"""
        since = from_epoch_ms(last_pulled_at)
        try:
            recipes = (
                self.db.query(Recipe)
                .filter(
                    Recipe.user_id == user_id,
                    Recipe.updated_at > since,
                    Recipe.deleted_at.is_(None),
                )
                .order_by(Recipe.updated_at, Recipe.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Sync pull failed", user_id=user_id, error=str(e))
            raise InternalError("Error fetching changes")

        changes = {"recipes": [recipe.to_dict() for recipe in recipes]}
        for collection in RESERVED_COLLECTIONS:
            changes[collection] = []

        log_business_event(
            "sync_pull",
            {"user_id": user_id, "last_pulled_at": last_pulled_at, "recipes": len(recipes)},
        )
        return {"changes": changes, "timestamp": now_ms()}

    def push(self, user_id: int, changes: List[RecipeChange], is_logout: bool = False) -> None:
        """
        Apply the caller's pending changes.

        All writes of one call share a single transaction: a failure on any
        change rolls back the whole push.
        """
        try:
            if is_logout:
                cleared = self._soft_delete_all(user_id)
                self.db.commit()
                log_business_event("sync_logout", {"user_id": user_id, "recipes_cleared": cleared})
                return

            for change in changes:
                # The authenticated caller always owns the change
                change.user_id = user_id
                self._apply(user_id, change)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Sync push failed", user_id=user_id, is_logout=is_logout, error=str(e))
            if is_logout:
                raise InternalError("Error clearing user recipes")
            raise InternalError("Error applying changes")

        log_business_event("sync_push", {"user_id": user_id, "changes": len(changes)})

    def _apply(self, user_id: int, change: RecipeChange) -> None:
        if change.sync_status is None:
            logger.info("Skipping change with unknown sync status", user_id=user_id, client_id=change.id)
            return

        if change.sync_status == SyncStatus.CREATED:
            # The client id is discarded; the store assigns the authoritative id
            self.db.add(Recipe(
                user_id=user_id,
                **{field: getattr(change, field) for field in SYNCED_FIELDS},
            ))
            self.db.flush()
            return

        recipe_id = change.server_id()
        if recipe_id is None:
            logger.info(
                "Skipping change without a server id",
                user_id=user_id,
                sync_status=change.sync_status.value,
                client_id=change.id,
            )
            return

        now = utcnow()
        if change.sync_status == SyncStatus.UPDATED:
            values = {
                field: getattr(change, field)
                for field in SYNCED_FIELDS
                if field in change.model_fields_set
            }
            values["updated_at"] = now
            self._active(user_id, recipe_id).update(values, synchronize_session=False)
        elif change.sync_status == SyncStatus.DELETED:
            self._active(user_id, recipe_id).update(
                {"deleted_at": now, "updated_at": now},
                synchronize_session=False,
            )

    def _active(self, user_id: int, recipe_id: int):
        return self.db.query(Recipe).filter(
            Recipe.id == recipe_id,
            Recipe.user_id == user_id,
            Recipe.deleted_at.is_(None),
        )

    def _soft_delete_all(self, user_id: int) -> int:
        now = utcnow()
        return (
            self.db.query(Recipe)
            .filter(Recipe.user_id == user_id, Recipe.deleted_at.is_(None))
            .update({"deleted_at": now, "updated_at": now}, synchronize_session=False)
        )
