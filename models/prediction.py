from pydantic import BaseModel
from typing import Any, List

PREDICTION_EVENT_TYPES = [
    {"value": "wedding", "label": "Wedding", "avg_attendees": 200},
    {"value": "corporate", "label": "Corporate Event", "avg_attendees": 150},
    {"value": "conference", "label": "Conference", "avg_attendees": 300},
    {"value": "hotel_buffet", "label": "Hotel Buffet", "avg_attendees": 100},
    {"value": "catering", "label": "Catering Service", "avg_attendees": 80},
]

DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

class PredictionRequest(BaseModel):
    # Values are forwarded to the prompt as-is, no range or enum checks
    event_type: Any
    expected_attendees: Any
    day_of_week: Any

class PredictionResult(BaseModel):
    predicted_demand: float
    confidence: float
    recommendations: List[str]

    model_config = {
        "json_schema_extra": {
            "example": {
                "predicted_demand": 160.0,
                "confidence": 82,
                "recommendations": [
                    "Plan 0.8kg per guest and keep 10% in reserve",
                    "Arrange an NGO pickup for leftovers within 2 hours",
                    "Use smaller serving trays and refill often"
                ]
            }
        }
    }

class ErrorResponse(BaseModel):
    error: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "Rate limit exceeded. Please try again later."
            }
        }
    }
