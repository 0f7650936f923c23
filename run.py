"""
Entry point for running the Wellness Tracker Flask application.

This module imports the application factory and starts the development
server when executed directly. In production a WSGI server like
gunicorn should import ``app`` from ``wsgi`` and serve it instead.
"""

import logging
import os

from wellness_tracker import create_app

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()

if __name__ == "__main__":
    # the reloader rebuilds (and re-seeds) the in-memory store
    app.run(host="0.0.0.0", port=5000, debug=True)
