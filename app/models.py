"""
Database models for the Rooming List Management application.

This module defines SQLAlchemy models representing rooming lists (one
per RFP, grouped by event) and the bookings attached to them.
"""

from datetime import date
from enum import Enum
from typing import Any

from app import db


class RfpStatus(str, Enum):
    """Enumeration of possible RFP statuses."""

    ACTIVE = "Active"
    CLOSED = "Closed"
    CANCELLED = "Cancelled"


class AgreementType(str, Enum):
    """Enumeration of agreement types shown on event cards."""

    LEISURE = "Leisure"
    STAFF = "Staff"
    ARTIST = "Artist"


class RoomingList(db.Model):
    """
    Rooming list negotiated through one RFP for an event.

    Attributes:
        id: Unique identifier for the rooming list.
        event_id: Identifier of the event the RFP belongs to.
        event_name: Display name of the event.
        rfp_name: Name of the RFP (rendered in square brackets on cards).
        agreement_type: Agreement type (leisure, staff, artist).
        cut_off_date: Last day changes to the list are accepted.
        status: Current RFP status (Active, Closed, Cancelled).
        bookings: Bookings attached to the rooming list.
    """

    __tablename__ = "rooming_lists"

    id: int = db.Column(db.Integer, primary_key=True)
    event_id: str = db.Column(db.String(50), nullable=False, index=True)
    event_name: str = db.Column(db.String(200), nullable=False)
    rfp_name: str = db.Column(db.String(200), nullable=False)
    agreement_type: str = db.Column(
        db.String(20),
        nullable=False,
        default=AgreementType.LEISURE.value
    )
    cut_off_date: date | None = db.Column(db.Date, nullable=True)
    status: str = db.Column(
        db.String(20),
        nullable=False,
        default=RfpStatus.ACTIVE.value
    )

    bookings = db.relationship(
        "Booking",
        back_populates="rooming_list",
        cascade="all, delete-orphan",
        order_by="Booking.id",
    )

    @property
    def booking_count(self) -> int:
        """Number of bookings attached to this rooming list."""
        return len(self.bookings)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the rooming list to the record shape the events view consumes.

        Returns:
            Dictionary with camelCase keys.
        """
        return {
            "roomingListId": self.id,
            "eventId": self.event_id,
            "eventName": self.event_name,
            "rfpName": self.rfp_name,
            "agreementType": self.agreement_type,
            "cutOffDate": self.cut_off_date.isoformat() if self.cut_off_date else None,
            "status": self.status,
            "bookingCount": self.booking_count,
        }

    def __repr__(self) -> str:
        """Return string representation of the rooming list."""
        return f"<RoomingList {self.id}: [{self.rfp_name}]>"


class Booking(db.Model):
    """
    Hotel booking for one guest on a rooming list.

    Attributes:
        id: Unique identifier for the booking.
        rooming_list_id: Owning rooming list.
        guest_name: Full name of the guest.
        guest_phone: Optional contact number.
        check_in_date: Arrival date.
        check_out_date: Departure date.
    """

    __tablename__ = "bookings"

    id: int = db.Column(db.Integer, primary_key=True)
    rooming_list_id: int = db.Column(
        db.Integer,
        db.ForeignKey("rooming_lists.id"),
        nullable=False,
        index=True
    )
    guest_name: str = db.Column(db.String(200), nullable=False)
    guest_phone: str | None = db.Column(db.String(50), nullable=True)
    check_in_date: date = db.Column(db.Date, nullable=False)
    check_out_date: date = db.Column(db.Date, nullable=False)

    rooming_list = db.relationship("RoomingList", back_populates="bookings")

    def to_dict(self) -> dict[str, Any]:
        """Convert the booking to a dictionary representation."""
        return {
            "bookingId": self.id,
            "roomingListId": self.rooming_list_id,
            "guestName": self.guest_name,
            "guestPhone": self.guest_phone,
            "checkInDate": self.check_in_date.isoformat(),
            "checkOutDate": self.check_out_date.isoformat(),
        }

    def __repr__(self) -> str:
        return f"<Booking {self.id}: {self.guest_name}>"
