import logging
from typing import Any, Dict, List, Optional

from services.foodrescue_client import FoodRescueClient, ClientError

logger = logging.getLogger(__name__)

class NGODirectory:
    def __init__(self):
        self.ngos: List[Dict[str, Any]] = []
        self.selected_id: Optional[str] = None
        self.loading = True

    def load(self, client: FoodRescueClient) -> List[Dict[str, Any]]:
        try:
            self.ngos = client.list_ngos()
        except ClientError as e:
            logger.error(f"Error fetching NGOs: {str(e)}")
        finally:
            self.loading = False
        return self.ngos

    @property
    def selected(self) -> Optional[Dict[str, Any]]:
        for ngo in self.ngos:
            if ngo["id"] == self.selected_id:
                return ngo
        return None

    def select(self, ngo_id: str) -> Optional[Dict[str, Any]]:
        self.selected_id = ngo_id
        return self.selected

    def markers(self) -> List[Dict[str, Any]]:
        # Stylised placement on the map canvas, in percent
        return [
            {
                "id": ngo["id"],
                "name": ngo["name"],
                "left": 20 + (index * 15) % 60,
                "top": 25 + (index * 12) % 50,
                "selected": ngo["id"] == self.selected_id,
            }
            for index, ngo in enumerate(self.ngos)
        ]

    def summary(self) -> str:
        return f"Interactive map showing {len(self.ngos)} partner NGOs"

    def heading(self) -> str:
        return f"Partner NGOs ({len(self.ngos)})"

    @staticmethod
    def capacity_label(ngo: Dict[str, Any]) -> Optional[str]:
        capacity = ngo.get("capacity_kg")
        if not capacity:
            return None
        return f"{capacity:g}kg capacity"
