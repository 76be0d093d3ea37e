"""Script to run the reference check backend for development."""

import os
import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import uvicorn

from src.vehicle_check.config import get_settings
from src.vehicle_check.infrastructure.logging import setup_logging
from src.vehicle_check.presentation.api.main import create_app


def run_reference_backend():
    """Serve the backend on BACKEND_HOST:BACKEND_PORT."""
    settings = get_settings()
    setup_logging(settings)
    host = os.getenv('BACKEND_HOST', '127.0.0.1')
    port = int(os.getenv('BACKEND_PORT', '8000'))

    print(f"Starting reference check backend on http://{host}:{port}")
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


if __name__ == "__main__":
    run_reference_backend()
