#!/usr/bin/env python3
"""Start the Balcony Configurator API server."""

import uvicorn

from balcony import config

if __name__ == "__main__":
    config.configure_logging()
    uvicorn.run(
        "balcony.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        reload_dirs=["balcony"],
    )
