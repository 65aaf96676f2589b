import argparse

import uvicorn

from expense_recon.config import get_settings
from expense_recon.main import app

if __name__ == "__main__":
    settings = get_settings()

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to run the server on")
    args = parser.parse_args()

    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.app_log_level.lower())
