import logging
from typing import Any, Dict, List

from models.submission import FOOD_TYPES, EVENT_TYPES, UNITS
from services.foodrescue_client import FoodRescueClient, ClientError
from views.notifications import Notification

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["food_type", "quantity", "location"]

MISSING_FIELDS_MESSAGE = "Please fill in all required fields"
SUCCESS_MESSAGE = "Food submission recorded successfully!"
FAILURE_MESSAGE = "Failed to submit food data. Please try again."

INITIAL_STATE = {
    "food_type": "",
    "quantity": "",
    "unit": "kg",
    "location": "",
    "event_type": "",
    "notes": "",
}

class SubmissionForm:
    """State of the "Submit Surplus Food" form.

    Fields hold raw text as typed by the user; conversion happens only when
    the payload is built for submission.
    """

    def __init__(self, **fields: str):
        self.fields: Dict[str, str] = dict(INITIAL_STATE)
        for name, value in fields.items():
            self.set(name, value)
        self.is_submitting = False

    @staticmethod
    def options() -> Dict[str, List[str]]:
        return {"food_type": FOOD_TYPES, "event_type": EVENT_TYPES, "unit": UNITS}

    def set(self, name: str, value: str):
        if name not in INITIAL_STATE:
            raise KeyError(f"Unknown form field: {name}")
        self.fields[name] = value

    def missing_required(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not str(self.fields[name]).strip()]

    def is_pristine(self) -> bool:
        return self.fields == INITIAL_STATE

    def reset(self):
        self.fields = dict(INITIAL_STATE)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "food_type": self.fields["food_type"],
            "quantity": float(self.fields["quantity"]),
            "unit": self.fields["unit"],
            "location": self.fields["location"],
            "event_type": self.fields["event_type"] or None,
            "notes": self.fields["notes"] or None,
            "status": "available",
        }

    def submit(self, client: FoodRescueClient) -> Notification:
        if self.missing_required():
            return Notification.error(MISSING_FIELDS_MESSAGE)

        self.is_submitting = True
        try:
            client.insert_submission(self.to_payload())
        except (ClientError, ValueError) as e:
            logger.error(f"Error submitting food: {str(e)}")
            return Notification.error(FAILURE_MESSAGE)
        finally:
            self.is_submitting = False

        self.reset()
        return Notification.success(SUCCESS_MESSAGE)
