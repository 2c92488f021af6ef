"""
Development server launcher.

Loads .env file and runs FastAPI with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the SickSquares API with auto-reload.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print("=" * 60)
    print("SickSquares Development Server")
    print("=" * 60)
    print(f"API:  http://{args.host}:{args.port}")
    print(f"Docs: http://{args.host}:{args.port}/docs")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level="info")
