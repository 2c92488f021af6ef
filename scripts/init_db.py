"""
Database initialization script.

Creates the users and user_grids tables on the configured database.
Prefer ``alembic upgrade head`` for managed environments.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.init_db import init_db
from app.db.session import create_db_engine

if __name__ == "__main__":
    setup_logging("INFO")
    print("=" * 50)
    print("SickSquares Database Initialization")
    print("=" * 50)

    engine = create_db_engine(settings)
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)
    finally:
        engine.dispose()

    print("SUCCESS: Database initialized!")
