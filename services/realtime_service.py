import asyncio
import json
import logging
from typing import Any, Dict, Set

logger = logging.getLogger(__name__)

SUBMISSIONS_CHANNEL = "food-submissions-changes"

class SubmissionBroadcaster:
    """Fan-out of food_submissions INSERT notifications to live subscribers.

    Each subscriber owns a bounded queue. When a slow subscriber's queue is
    full the oldest pending notification is dropped.
    """

    def __init__(self, max_pending: int = 100):
        self.max_pending = max_pending
        self._subscribers: Set[asyncio.Queue] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.max_pending)
        self._subscribers.add(queue)
        logger.info(f"Subscriber joined {SUBMISSIONS_CHANNEL} ({len(self._subscribers)} active)")
        return queue

    def unsubscribe(self, queue: asyncio.Queue):
        self._subscribers.discard(queue)
        logger.info(f"Subscriber left {SUBMISSIONS_CHANNEL} ({len(self._subscribers)} active)")

    def publish(self, row: Dict[str, Any]) -> int:
        notification = {"event": "INSERT", "table": "food_submissions", "new": row}
        for queue in list(self._subscribers):
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(notification)
        return len(self._subscribers)

def format_sse(event: str, data: Dict[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(data, default=str)}\n\n"

broadcaster = SubmissionBroadcaster()
