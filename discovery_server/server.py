#!/usr/bin/env python3
"""
Worker Discovery Server: entrypoint for uvicorn discovery_server.server:app.

For uvicorn discovery_server:app use discovery_server/__init__.py (exposes app from discovery_server.app).
"""

from .app import app

if __name__ == "__main__":
    import uvicorn

    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)
