#!/usr/bin/env python3
"""
Manual database setup script
Run this to create the tables and load the demo rows into an empty database
"""
import logging

from sqlmodel import Session

from hospital_api.config import settings
from hospital_api.database import create_db_and_tables, engine
from hospital_api.seed import seed_demo_data


def main():
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO), format=settings.LOG_FORMAT)
    print(f"Connecting to database {engine.url.render_as_string(hide_password=True)}...")
    create_db_and_tables()
    with Session(engine) as session:
        if seed_demo_data(session):
            print("Demo data loaded successfully")
        else:
            print("Database already has data, nothing to do")


if __name__ == "__main__":
    main()
