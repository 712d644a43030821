from pydantic import BaseModel
from datetime import datetime
from typing import Optional, List

FOOD_TYPES = [
    "Cooked Meals",
    "Fresh Vegetables",
    "Fresh Fruits",
    "Bread & Bakery",
    "Dairy Products",
    "Beverages",
    "Packaged Foods",
    "Mixed Items",
    "Other",
]

EVENT_TYPES = [
    "Hotel Buffet",
    "Wedding",
    "Corporate Event",
    "Conference",
    "Restaurant",
    "Catering Service",
    "Other",
]

UNITS = ["kg", "portions", "liters", "items"]

class FoodSubmissionCreate(BaseModel):
    food_type: str
    quantity: float
    unit: str = "kg"
    location: str
    event_type: Optional[str] = None
    notes: Optional[str] = None
    status: str = "available"

    model_config = {
        "json_schema_extra": {
            "example": {
                "food_type": "Cooked Meals",
                "quantity": 12.5,
                "unit": "kg",
                "location": "12 Harbour Road, Banquet Hall B",
                "event_type": "Wedding",
                "notes": "Best before 22:00, contains nuts",
                "status": "available"
            }
        }
    }

    def missing_fields(self) -> List[str]:
        missing = []
        if not self.food_type.strip():
            missing.append("food_type")
        if not self.location.strip():
            missing.append("location")
        return missing

class FoodSubmission(FoodSubmissionCreate):
    id: str
    status: Optional[str] = "available"
    created_at: datetime
