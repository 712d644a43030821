import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from config import settings
from services.foodrescue_client import FoodRescueClient, ClientError

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No food submissions yet. Be the first to contribute!"

STATUS_BADGES = {
    "available": "success",
    "claimed": "secondary",
    "collected": "muted",
}

def status_badge(status: Optional[str]) -> Dict[str, str]:
    return {
        "label": status or "pending",
        "tone": STATUS_BADGES.get(status, "primary"),
    }

def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment

def time_ago(created_at, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    seconds = (now - _parse_timestamp(created_at)).total_seconds()

    if seconds < 30:
        return "less than a minute ago"
    minutes = round(seconds / 60)
    if minutes < 45:
        return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
    hours = round(minutes / 60)
    if hours < 24:
        return f"about {hours} hour{'s' if hours != 1 else ''} ago"
    days = round(hours / 24)
    if days < 30:
        return f"{days} day{'s' if days != 1 else ''} ago"
    months = round(days / 30)
    if months < 12:
        return f"about {months} month{'s' if months != 1 else ''} ago"
    years = round(months / 12)
    return f"about {years} year{'s' if years != 1 else ''} ago"

class RecentSubmissionsFeed:
    """Newest-first list of submissions kept current by live INSERTs."""

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit or settings.RECENT_SUBMISSIONS_LIMIT
        self.submissions: List[Dict[str, Any]] = []
        self.loading = True

    def load(self, client: FoodRescueClient) -> List[Dict[str, Any]]:
        try:
            self.submissions = client.recent_submissions(self.limit)[:self.limit]
        except ClientError as e:
            logger.error(f"Error fetching submissions: {str(e)}")
        finally:
            self.loading = False
        return self.submissions

    def apply_insert(self, row: Dict[str, Any]):
        self.submissions = [row] + self.submissions[:self.limit - 1]

    def listen(self, client: FoodRescueClient, max_events: Optional[int] = None) -> int:
        received = 0
        for row in client.stream_submission_inserts():
            self.apply_insert(row)
            received += 1
            if max_events is not None and received >= max_events:
                break
        return received

    def is_empty(self) -> bool:
        return not self.loading and not self.submissions

    def cards(self, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        return [
            {
                "id": row.get("id"),
                "title": row.get("food_type"),
                "subtitle": row.get("event_type"),
                "quantity": f"{row.get('quantity')} {row.get('unit')}",
                "location": row.get("location"),
                "badge": status_badge(row.get("status")),
                "age": time_ago(row["created_at"], now),
            }
            for row in self.submissions
        ]
