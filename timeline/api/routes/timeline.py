"""Timeline API routes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter, HTTPException, Query

from ...app import IApplication
from ...logging_config import get_logger
from ...models import (
    DEFAULT_QUERY_LIMIT,
    EventKind,
    TimelineQuery,
    event_from_dict,
    event_to_dict,
    snapshot_to_dict,
)
from .control import StatusResponse

logger = get_logger(__name__)


class TimelineEventBody(BaseModel):
    """Wire shape of a timeline event."""

    model_config = ConfigDict(populate_by_name=True)

    timestamp: float
    type: EventKind
    target_name: str = Field(alias="targetName")
    data: Any = None


class StatsResponse(BaseModel):
    """Response model for timeline stats."""

    size: int
    max_size: int


def create_timeline_router(app: IApplication) -> APIRouter:
    """Create timeline router."""
    router = APIRouter(prefix="/api/timeline", tags=["timeline"])

    @router.get("", response_model=list[TimelineEventBody])
    async def query_timeline(
        start_time: float | None = Query(None, description="Inclusive lower bound"),
        end_time: float | None = Query(None, description="Inclusive upper bound"),
        target_name: str | None = Query(None, description="Filter by target"),
        event_type: EventKind | None = Query(None, description="Filter by kind"),
        limit: int = Query(DEFAULT_QUERY_LIMIT, ge=1, le=1000),
    ) -> list[dict]:
        """Get retained events, newest first."""
        try:
            events = app.store.query(
                TimelineQuery(
                    start_time=start_time,
                    end_time=end_time,
                    target_name=target_name,
                    event_type=event_type,
                    limit=limit,
                )
            )
            return [event_to_dict(e) for e in events]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/snapshots/{target_name}")
    async def get_snapshot(target_name: str) -> dict[str, Any]:
        """Get the latest retained snapshot for a target."""
        try:
            snapshot = app.store.get_snapshot(target_name)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if snapshot is None:
            raise HTTPException(
                status_code=404, detail=f"No snapshot retained for {target_name}"
            )
        return snapshot_to_dict(snapshot)

    @router.post("/events", response_model=StatusResponse)
    async def append_event(body: TimelineEventBody) -> dict:
        """Append an event to the timeline."""
        try:
            event = event_from_dict(body.model_dump(mode="json", by_alias=True))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            app.store.append(event)
            return {"status": "ok"}
        except Exception as e:
            logger.error("Failed to append event: %s", e)
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/stats", response_model=StatsResponse)
    async def get_stats() -> dict:
        """Get retained event count and capacity."""
        try:
            return {"size": app.store.size, "max_size": app.store.max_size}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
