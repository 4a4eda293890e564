"""
HTML view routes for the Rooming List Management web interface.

The events page is a single template; its script loads the listing from
the API, so the same page works against live or mocked data.

Routes:
    GET  /              - Rooming list events page
"""

import logging
from flask import Blueprint, render_template

from app.models import RfpStatus

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


@views_bp.route("/")
def index():
    """
    Render the rooming list events page.

    Returns:
        Rendered index.html template.
    """
    logger.info("GET / - Rendering rooming list events")

    return render_template("index.html", statuses=RfpStatus)
