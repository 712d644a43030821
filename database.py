import sqlite3
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from config import settings
from models.submission import FoodSubmission, FoodSubmissionCreate
from models.ngo import NGO

logger = logging.getLogger(__name__)

SUBMISSION_COLUMNS = "id, food_type, quantity, unit, location, event_type, notes, status, created_at"

NGO_COLUMNS = "id, name, address, latitude, longitude, contact_phone, contact_email, description, capacity_kg"

class DatabaseError(Exception):
    pass

def get_db_connection() -> sqlite3.Connection:
    db_path = settings.DB_PATH
    if not os.path.exists(db_path):
        logger.error(f"Database file not found: {db_path}")
        raise DatabaseError(f"Database file not found: {db_path}")

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn

def _row_to_submission(row: sqlite3.Row) -> FoodSubmission:
    return FoodSubmission(**dict(row))

def _row_to_ngo(row: sqlite3.Row) -> NGO:
    return NGO(**dict(row))

def insert_submission(data: FoodSubmissionCreate) -> FoodSubmission:
    submission = FoodSubmission(
        id=str(uuid.uuid4()),
        created_at=datetime.now(timezone.utc),
        **data.model_dump()
    )

    try:
        conn = get_db_connection()
        try:
            conn.execute(f'''
                INSERT INTO food_submissions ({SUBMISSION_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            ''', (
                submission.id,
                submission.food_type,
                submission.quantity,
                submission.unit,
                submission.location,
                submission.event_type,
                submission.notes,
                submission.status,
                submission.created_at.isoformat()
            ))
            conn.commit()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logger.error(f"Error inserting food submission: {str(e)}")
        raise DatabaseError(str(e)) from e

    logger.info(f"Food submission {submission.id} recorded ({submission.quantity} {submission.unit} of {submission.food_type})")
    return submission

def get_recent_submissions(limit: Optional[int] = None) -> List[FoodSubmission]:
    if limit is None:
        limit = settings.RECENT_SUBMISSIONS_LIMIT

    try:
        conn = get_db_connection()
        try:
            cursor = conn.execute(f'''
                SELECT {SUBMISSION_COLUMNS}
                FROM food_submissions
                ORDER BY created_at DESC, rowid DESC
                LIMIT ?
            ''', (limit,))
            rows = cursor.fetchall()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logger.error(f"Error fetching submissions: {str(e)}")
        raise DatabaseError(str(e)) from e

    return [_row_to_submission(row) for row in rows]

def list_ngos() -> List[NGO]:
    try:
        conn = get_db_connection()
        try:
            cursor = conn.execute(f'''
                SELECT {NGO_COLUMNS}
                FROM ngos
                ORDER BY name COLLATE NOCASE ASC
            ''')
            rows = cursor.fetchall()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logger.error(f"Error fetching NGOs: {str(e)}")
        raise DatabaseError(str(e)) from e

    return [_row_to_ngo(row) for row in rows]

def get_ngo(ngo_id: str) -> Optional[NGO]:
    try:
        conn = get_db_connection()
        try:
            cursor = conn.execute(f'''
                SELECT {NGO_COLUMNS}
                FROM ngos
                WHERE id = ?
            ''', (ngo_id,))
            row = cursor.fetchone()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logger.error(f"Error fetching NGO {ngo_id}: {str(e)}")
        raise DatabaseError(str(e)) from e

    return _row_to_ngo(row) if row else None
