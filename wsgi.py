# wsgi.py (at repo root), e.g. ``gunicorn wsgi:app``
import logging

from wellness_tracker import create_app

logging.basicConfig(level=logging.INFO)

app = create_app()
