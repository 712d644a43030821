import logging
import re
from typing import Any, Dict, List, Optional

from models.prediction import PredictionResult, PREDICTION_EVENT_TYPES, DAYS_OF_WEEK
from services.foodrescue_client import FoodRescueClient, ClientError
from views.notifications import Notification

logger = logging.getLogger(__name__)

FUNCTION_NAME = "predict-demand"

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
SUCCESS_MESSAGE = "Prediction generated successfully!"
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
CREDITS_EXHAUSTED_MESSAGE = "AI credits exhausted. Please add credits to continue."
FAILURE_MESSAGE = "Failed to generate prediction. Please try again."

def describe_prediction_error(error: ClientError) -> str:
    if error.status_code == 429 or "429" in error.message:
        return RATE_LIMIT_MESSAGE
    if error.status_code == 402 or "402" in error.message:
        return CREDITS_EXHAUSTED_MESSAGE
    return FAILURE_MESSAGE

def parse_int(value) -> Optional[int]:
    """Leading integer of the text, like a browser's parseInt; None when there is none."""
    match = re.match(r"\s*([+-]?\d+)", str(value))
    return int(match.group(1)) if match else None

def average_attendees(event_type: str) -> Optional[int]:
    for option in PREDICTION_EVENT_TYPES:
        if option["value"] == event_type:
            return option["avg_attendees"]
    return None

DAY_OPTIONS = [{"value": day.lower(), "label": day} for day in DAYS_OF_WEEK]

class DemandPredictionPanel:
    def __init__(self):
        self.fields: Dict[str, str] = {
            "event_type": "",
            "expected_attendees": "",
            "day_of_week": "",
        }
        self.prediction: Optional[PredictionResult] = None
        self.loading = False

    def set(self, name: str, value: str):
        if name not in self.fields:
            raise KeyError(f"Unknown form field: {name}")
        self.fields[name] = value

    def missing_required(self) -> List[str]:
        return [name for name, value in self.fields.items() if not str(value).strip()]

    def to_body(self) -> Dict[str, Any]:
        return {
            "event_type": self.fields["event_type"],
            "expected_attendees": parse_int(self.fields["expected_attendees"]),
            "day_of_week": self.fields["day_of_week"].lower(),
        }

    def request_prediction(self, client: FoodRescueClient) -> Notification:
        if self.missing_required():
            return Notification.error(MISSING_FIELDS_MESSAGE)

        self.loading = True
        self.prediction = None
        try:
            data = client.invoke_function(FUNCTION_NAME, self.to_body())
            self.prediction = PredictionResult(**data)
        except ClientError as e:
            logger.error(f"Prediction error: {str(e)}")
            return Notification.error(describe_prediction_error(e))
        except (ValueError, TypeError) as e:
            logger.error(f"Prediction error: {str(e)}")
            return Notification.error(FAILURE_MESSAGE)
        finally:
            self.loading = False

        return Notification.success(SUCCESS_MESSAGE)
