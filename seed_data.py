#!/usr/bin/env python3

import sys
import os

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from src.config import settings
from src.database import Database
from src.logger import logger, setup_logging
from src.models import User, Train, Ticket
from src.seed import seed_database


def create_seed_data():
    setup_logging()
    database = Database(settings.database_url)

    try:
        logger.info("Creating seed data for IndiaRail Booking API...")
        database.create_all()

        db = database.session()
        try:
            seed_database(db)
            logger.info("Successfully created seed data")
            logger.info(f"  - {db.query(User).count()} users")
            logger.info(f"  - {db.query(Train).count()} trains")
            logger.info(f"  - {db.query(Ticket).count()} tickets")
        finally:
            db.close()
    finally:
        database.dispose()


if __name__ == "__main__":
    create_seed_data()
