from fastapi import APIRouter, HTTPException
from typing import List
import logging

from models.ngo import NGO
from database import list_ngos, get_ngo, DatabaseError

router = APIRouter(
    prefix="/ngos",
    tags=["NGOs"]
)

logger = logging.getLogger(__name__)

@router.get("", response_model=List[NGO], summary="Partner NGOs sorted by name")
async def get_ngos():
    try:
        return list_ngos()
    except DatabaseError as e:
        logger.error(f"Error fetching NGOs: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch NGOs")

@router.get("/{ngo_id}", response_model=NGO)
async def get_ngo_details(ngo_id: str):
    try:
        ngo = get_ngo(ngo_id)
    except DatabaseError as e:
        logger.error(f"Error fetching NGO {ngo_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch NGO")

    if not ngo:
        raise HTTPException(status_code=404, detail=f"NGO {ngo_id} not found")
    return ngo
