#!/usr/bin/env python3
"""
Create database tables for Mailtext Admin.
Used on first start when migrations are not run.
"""
import sys
from pathlib import Path

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from mailtext.core.database import engine, Base
from mailtext.models import User, TranslationOverride, UserHistory  # noqa: F401


def create_tables():
    """Create all tables"""
    print("Creating tables...")
    
    try:
        Base.metadata.create_all(bind=engine)
        
        print("Tables created:")
        for table in Base.metadata.sorted_tables:
            print(f"   - {table.name}")
        
    except SQLAlchemyError as e:
        print(f"Error creating tables: {e}")
        sys.exit(1)

if __name__ == "__main__":
    create_tables()
