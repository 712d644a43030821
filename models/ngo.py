from pydantic import BaseModel
from typing import Optional

class NGO(BaseModel):
    id: str
    name: str
    address: str
    latitude: float
    longitude: float
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    description: Optional[str] = None
    capacity_kg: Optional[float] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "7d0c1f64-3f8e-4c1b-9a57-2f1e0c5b9d11",
                "name": "City Harvest Kitchen",
                "address": "48 Market Street",
                "latitude": 19.076,
                "longitude": 72.8777,
                "contact_phone": "+91 22 5555 0101",
                "contact_email": "pickup@cityharvest.example.org",
                "description": "Community kitchen serving 400 meals a day",
                "capacity_kg": 250
            }
        }
    }
