#!/usr/bin/env python3
"""
WSGI callable for Gunicorn and similar servers, e.g.
`gunicorn wsgi:application`. Startup fails if the bucket is unset or the
credential file is missing.
"""

from resume_intake.app import create_app

application = create_app()
