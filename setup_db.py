import logging
import sys
import argparse

# Configure logging to output to console
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Set up the FoodRescue database')
    parser.add_argument('--ngo-file', default=None, help='JSON array of partner NGOs to import (defaults to the bundled sample)')
    parser.add_argument('--batch-size', type=int, default=100, help='Batch size for database transactions')
    parser.add_argument('--clear', action='store_true', help='Remove existing NGOs before importing')
    parser.add_argument('--skip-import', action='store_true', help='Only create the schema')
    return parser.parse_args(argv)

def main(argv=None) -> int:
    """Create the SQLite schema and import partner NGOs"""
    args = parse_args(argv)

    from database_schema import create_database
    from ngo_importer import import_ngos

    logger.info("Creating database schema...")
    try:
        create_database()
    except Exception as e:
        logger.exception(f"Error creating database schema: {e}")
        return 1

    if args.skip_import:
        logger.info("Database setup completed (schema only)")
        return 0

    logger.info("Importing NGOs...")
    try:
        imported = import_ngos(
            path=args.ngo_file,
            clear_existing=args.clear,
            batch_size=args.batch_size
        )
    except Exception as e:
        logger.exception(f"Error during NGO import: {e}")
        return 1

    logger.info(f"Database setup completed! {imported} NGOs available")
    return 0

if __name__ == "__main__":
    sys.exit(main())
