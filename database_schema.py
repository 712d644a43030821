import sqlite3
import os
import logging
from pathlib import Path
from typing import Optional

from config import settings

logger = logging.getLogger(__name__)

def create_database(db_path: Optional[str] = None):
    """Create the SQLite database and tables if they don't exist"""
    db_path = Path(db_path or settings.DB_PATH)
    os.makedirs(os.path.dirname(db_path), exist_ok=True)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    # Create food_submissions table
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS food_submissions (
        id TEXT PRIMARY KEY,
        food_type TEXT NOT NULL,
        quantity REAL NOT NULL,
        unit TEXT NOT NULL DEFAULT 'kg',
        location TEXT NOT NULL,
        event_type TEXT,
        notes TEXT,
        status TEXT DEFAULT 'available',
        created_at TEXT NOT NULL
    )
    ''')

    # Create ngos table
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS ngos (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        address TEXT NOT NULL,
        latitude REAL NOT NULL,
        longitude REAL NOT NULL,
        contact_phone TEXT,
        contact_email TEXT,
        description TEXT,
        capacity_kg REAL
    )
    ''')

    # Recent submissions are always read newest first
    cursor.execute('CREATE INDEX IF NOT EXISTS idx_submissions_created_at ON food_submissions (created_at)')

    cursor.execute('CREATE INDEX IF NOT EXISTS idx_ngos_name ON ngos (name COLLATE NOCASE)')

    conn.commit()
    conn.close()

    logger.info(f"Database created at {db_path}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_database()
