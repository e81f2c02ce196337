from __future__ import annotations

from flask import Blueprint


# Create the blueprint
api_bp = Blueprint("api", __name__, url_prefix="/api")


# Import API routes to register them on blueprint after blueprint creation
from .resumes import *
