#!/usr/bin/env python3
"""Run the analytics API."""

import uvicorn

from settings import API_HOST, API_PORT, LOG_LEVEL
from settings.logging import setup_logging

if __name__ == "__main__":
    setup_logging(level=LOG_LEVEL, to_file=True)
    # log_config=None keeps the loguru bridge installed above
    uvicorn.run("web.api.main:app", host=API_HOST, port=API_PORT, log_config=None)
