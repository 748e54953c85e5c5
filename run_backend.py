#!/usr/bin/env python3
"""Start the Shower Tile Layout API server."""

import logging

import uvicorn

from tilelayout import config

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "tilelayout.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        reload_dirs=["tilelayout"],
    )
