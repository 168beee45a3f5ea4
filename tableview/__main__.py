"""
Run the web server.

Usage:
    python -m tableview
    python -m tableview --port 9000
"""

import argparse

import uvicorn

from tableview.api import create_app
from tableview.config import settings


def main():
    parser = argparse.ArgumentParser(description="Serve dvdrental tables over HTTP")
    parser.add_argument("--host", default=settings.http_host, help="Listen address")
    parser.add_argument("--port", type=int, default=settings.http_port, help="Listen port")
    args = parser.parse_args()

    uvicorn.run(create_app(settings), host=args.host, port=args.port,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
