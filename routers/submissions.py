from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import StreamingResponse
from typing import List
import asyncio
import logging

from models.submission import FoodSubmission, FoodSubmissionCreate
from database import insert_submission, get_recent_submissions, DatabaseError
from services.realtime_service import broadcaster, format_sse
from config import settings

router = APIRouter(
    prefix="/submissions",
    tags=["Food Submissions"]
)

logger = logging.getLogger(__name__)

KEEPALIVE_SECONDS = 15.0

@router.post("", response_model=FoodSubmission, status_code=201, summary="Record surplus food")
async def create_submission(submission: FoodSubmissionCreate):
    missing = submission.missing_fields()
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required fields: {', '.join(missing)}"
        )

    try:
        created = insert_submission(submission)
    except DatabaseError as e:
        logger.error(f"Error submitting food: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to submit food data")

    broadcaster.publish(created.model_dump(mode="json"))
    return created

@router.get("/recent", response_model=List[FoodSubmission], summary="Most recent submissions")
async def list_recent_submissions(limit: int = Query(settings.RECENT_SUBMISSIONS_LIMIT, ge=1)):
    limit = min(limit, settings.RECENT_SUBMISSIONS_LIMIT)
    try:
        return get_recent_submissions(limit)
    except DatabaseError as e:
        logger.error(f"Error fetching submissions: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch submissions")

async def submission_events(request: Request):
    queue = broadcaster.subscribe()
    try:
        while not await request.is_disconnected():
            try:
                notification = await asyncio.wait_for(queue.get(), timeout=KEEPALIVE_SECONDS)
            except asyncio.TimeoutError:
                yield ": keepalive\n\n"
                continue
            yield format_sse(notification["event"], notification["new"])
    finally:
        broadcaster.unsubscribe(queue)

@router.get("/stream", summary="Live INSERT notifications")
async def stream_submissions(request: Request):
    return StreamingResponse(
        submission_events(request),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"}
    )
