import json
import sqlite3
import os
import logging
import time
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import settings
from database_schema import create_database

logger = logging.getLogger(__name__)

SAMPLE_NGO_PATH = Path(os.path.dirname(os.path.abspath(__file__))) / "data" / "sample_ngos.json"

REQUIRED_NGO_FIELDS = ["name", "address", "latitude", "longitude"]

def load_ngo_file(path: Path) -> List[Dict[str, Any]]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"NGO file not found: {path}")

    with open(path, 'r', encoding='utf-8') as file:
        ngos = json.load(file)

    if not isinstance(ngos, list):
        raise ValueError(f"Expected a JSON array of NGOs in {path}")

    return ngos

def normalize_ngo(ngo: Dict[str, Any]) -> Optional[tuple]:
    missing = [field for field in REQUIRED_NGO_FIELDS if ngo.get(field) in (None, "")]
    if missing:
        logger.warning(f"Skipping NGO {ngo.get('name', 'unknown')}: missing {', '.join(missing)}")
        return None

    capacity = ngo.get("capacity_kg")
    return (
        str(ngo.get("id") or uuid.uuid4()),
        ngo["name"].strip(),
        ngo["address"].strip(),
        float(ngo["latitude"]),
        float(ngo["longitude"]),
        ngo.get("contact_phone") or None,
        ngo.get("contact_email") or None,
        ngo.get("description") or None,
        float(capacity) if capacity not in (None, "") else None,
    )

def import_ngos(path: Optional[Path] = None, clear_existing: bool = False,
                batch_size: int = 100, db_path: Optional[str] = None) -> int:
    """Load partner NGOs from a JSON array into the ngos table.

    Rows with the same id are replaced. Returns the number of NGOs written.
    """
    start_time = time.time()
    path = Path(path or SAMPLE_NGO_PATH)
    db_path = db_path or settings.DB_PATH

    ngos = load_ngo_file(path)
    logger.info(f"Loaded {len(ngos)} NGOs from {path}")

    create_database(db_path)
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    try:
        if clear_existing:
            logger.info("Clearing existing NGOs...")
            cursor.execute("DELETE FROM ngos")

        imported = 0
        batch_count = 0
        for ngo in ngos:
            if not isinstance(ngo, dict):
                continue

            try:
                row = normalize_ngo(ngo)
            except (TypeError, ValueError, AttributeError) as e:
                logger.error(f"Error importing NGO {ngo.get('name', 'unknown')}: {str(e)}")
                continue

            if row is None:
                continue

            cursor.execute('''
                INSERT OR REPLACE INTO ngos
                (id, name, address, latitude, longitude, contact_phone, contact_email, description, capacity_kg)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            ''', row)
            imported += 1
            batch_count += 1

            if batch_count >= batch_size:
                conn.commit()
                batch_count = 0
                logger.info(f"Imported {imported}/{len(ngos)} NGOs")

        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()

    elapsed = time.time() - start_time
    logger.info(f"Successfully imported {imported} of {len(ngos)} NGOs in {elapsed:.1f} seconds")
    return imported
