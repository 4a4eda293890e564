"""
Demo data for the reference application.

The events are shaped so the browser suite has something to walk: one
event holds more RFPs than a carousel shows at once, several RFP names
contain "Crew", and every status appears in more than one event.
"""

import logging
from datetime import date, timedelta

from sqlalchemy import select

from app import db
from app.models import AgreementType, Booking, RfpStatus, RoomingList

logger = logging.getLogger(__name__)


DEMO_EVENTS: list[dict] = [
    {
        "event_id": "ULTRA-MIA-2026",
        "event_name": "Ultra Music Festival 2026",
        "rfps": [
            ("Crew Ultra Miami", AgreementType.STAFF, RfpStatus.ACTIVE, date(2026, 1, 15), 4),
            ("Artist Hospitality", AgreementType.ARTIST, RfpStatus.CLOSED, date(2026, 1, 20), 2),
            ("Crew Stage Build", AgreementType.STAFF, RfpStatus.ACTIVE, date(2026, 2, 1), 3),
            ("Production Staff", AgreementType.STAFF, RfpStatus.CANCELLED, date(2026, 2, 5), 0),
            ("Crew Security", AgreementType.STAFF, RfpStatus.CLOSED, date(2026, 2, 9), 5),
            ("VIP Guests", AgreementType.LEISURE, RfpStatus.ACTIVE, date(2026, 2, 14), 1),
            ("Crew Catering", AgreementType.STAFF, RfpStatus.ACTIVE, date(2026, 3, 2), 2),
        ],
    },
    {
        "event_id": "RL-EU-2026",
        "event_name": "Rolling Loud Europe 2026",
        "rfps": [
            ("Crew Rolling Loud", AgreementType.STAFF, RfpStatus.CANCELLED, date(2026, 6, 1), 1),
            ("Vendors", AgreementType.LEISURE, RfpStatus.ACTIVE, date(2026, 6, 10), 3),
            ("Media Team", AgreementType.ARTIST, RfpStatus.CLOSED, date(2026, 6, 12), 2),
        ],
    },
    {
        "event_id": "EDC-LV-2026",
        "event_name": "EDC Las Vegas 2026",
        "rfps": [
            ("Crew EDC", AgreementType.STAFF, RfpStatus.CLOSED, date(2026, 5, 3), 2),
            ("Staff Lodging", AgreementType.STAFF, RfpStatus.ACTIVE, date(2026, 5, 8), 0),
        ],
    },
]

GUEST_NAMES: list[str] = [
    "Alex Morgan",
    "Jamie Chen",
    "Sam Okafor",
    "Riley Novak",
    "Taylor Brooks",
]


def seed_demo_data() -> int:
    """
    Insert the demo events unless rooming lists already exist.

    Must be called inside an application context.

    Returns:
        Number of rooming lists created.
    """
    if db.session.scalars(select(RoomingList).limit(1)).first() is not None:
        logger.info("Rooming lists already present, skipping demo seed")
        return 0

    created = 0
    for event in DEMO_EVENTS:
        for rfp_name, agreement, status, cut_off, booking_count in event["rfps"]:
            rooming_list = RoomingList(
                event_id=event["event_id"],
                event_name=event["event_name"],
                rfp_name=rfp_name,
                agreement_type=agreement.value,
                status=status.value,
                cut_off_date=cut_off,
            )
            check_in = cut_off + timedelta(days=30)
            for index in range(booking_count):
                rooming_list.bookings.append(
                    Booking(
                        guest_name=GUEST_NAMES[index % len(GUEST_NAMES)],
                        check_in_date=check_in,
                        check_out_date=check_in + timedelta(days=3),
                    )
                )
            db.session.add(rooming_list)
            created += 1

    db.session.commit()
    logger.info(f"Seeded {created} demo rooming lists")
    return created
