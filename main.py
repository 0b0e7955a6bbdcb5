"""
WorkGraph Server Entry Point

Run with: python main.py
Or with uvicorn: uvicorn app:app --reload
"""

import uvicorn

from workgraph.config import Config
from workgraph.utils.logger import setup_logging

if __name__ == "__main__":
    config = Config.from_env()
    setup_logging(config.logging)

    # log_config=None keeps uvicorn from replacing the loguru intercept
    uvicorn.run(
        "app:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
        log_level=config.logging.level.lower(),
        log_config=None,
    )
