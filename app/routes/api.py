"""
JSON API endpoints for rooming lists.

The events view fetches the listing once and groups, searches and
filters it in the browser, so the listing endpoint returns a bare JSON
array. The browser suite can substitute that array with a mocked one.

Endpoints:
    GET /api/health                          - Health check
    GET /api/rooming-lists                   - List rooming lists
    GET /api/rooming-lists/<id>/bookings     - Bookings of one rooming list
"""

import logging
import os
from flask import Blueprint, jsonify, request, Response
from sqlalchemy import select

from app import db
from app.models import Booking, RfpStatus, RoomingList

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/rooming-lists", methods=["GET"])
def get_rooming_lists() -> tuple[Response, int]:
    """
    List rooming lists ordered by event, then by id.

    Query Parameters:
        status: Restrict to a status; may be repeated
        search: Case-insensitive substring of the RFP name

    Returns:
        JSON array of rooming list records and 200 status code,
        or error message and 400 for an unknown status.
    """
    logger.info("GET /api/rooming-lists - Fetching rooming lists")

    stmt = select(RoomingList)

    statuses = request.args.getlist("status")
    if statuses:
        valid_statuses = [s.value for s in RfpStatus]
        unknown = [s for s in statuses if s not in valid_statuses]
        if unknown:
            return jsonify({
                "error": f"Invalid status. Must be one of: {valid_statuses}"
            }), 400
        stmt = stmt.where(RoomingList.status.in_(statuses))

    search = request.args.get("search", "").strip()
    if search:
        stmt = stmt.where(RoomingList.rfp_name.ilike(f"%{search}%"))

    stmt = stmt.order_by(RoomingList.event_id, RoomingList.id)
    rooming_lists = db.session.scalars(stmt).all()
    logger.info(f"Found {len(rooming_lists)} rooming lists")

    return jsonify([rooming_list.to_dict() for rooming_list in rooming_lists]), 200


@api_bp.route("/rooming-lists/<int:rooming_list_id>/bookings", methods=["GET"])
def get_bookings(rooming_list_id: int) -> tuple[Response, int]:
    """
    List the bookings of one rooming list.

    Args:
        rooming_list_id: The unique identifier of the rooming list.

    Returns:
        JSON array of bookings and 200 status code,
        or error message and 404 if the rooming list is not found.
    """
    logger.info(f"GET /api/rooming-lists/{rooming_list_id}/bookings - Fetching bookings")

    rooming_list = db.session.get(RoomingList, rooming_list_id)
    if not rooming_list:
        logger.warning(f"Rooming list {rooming_list_id} not found")
        return jsonify({"error": "Rooming list not found"}), 404

    stmt = (
        select(Booking)
        .where(Booking.rooming_list_id == rooming_list_id)
        .order_by(Booking.check_in_date, Booking.id)
    )
    bookings = db.session.scalars(stmt).all()

    return jsonify([booking.to_dict() for booking in bookings]), 200
