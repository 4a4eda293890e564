"""
Shared pytest fixtures for the rooming list test suite.

This module contains fixtures that are shared across all test modules:
the reference application, its database, and Faker-backed factories for
rooming lists (as database rows and as the JSON records the events view
consumes).
"""

import os
import pytest
from datetime import date, timedelta
from typing import Any
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app, db
from app.models import AgreementType, Booking, RfpStatus, RoomingList


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Yields:
        SQLAlchemy database handle.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rooming_list_factory(db_session):
    """
    Factory fixture for creating RoomingList rows with bookings.

    Example:
        def test_something(rooming_list_factory):
            rooming_list = rooming_list_factory(rfp_name="Crew A", bookings=2)
            assert rooming_list.booking_count == 2
    """

    def _create_rooming_list(
        event_id: str = "EVT-1",
        event_name: str | None = None,
        rfp_name: str | None = None,
        agreement_type: str = AgreementType.LEISURE.value,
        status: str = RfpStatus.ACTIVE.value,
        cut_off_date: date | None = None,
        bookings: int = 0,
    ) -> RoomingList:
        rooming_list = RoomingList(
            event_id=event_id,
            event_name=event_name or fake.catch_phrase(),
            rfp_name=rfp_name or fake.company(),
            agreement_type=agreement_type,
            status=status,
            cut_off_date=cut_off_date or fake.date_between(start_date="+1d", end_date="+180d"),
        )
        for _ in range(bookings):
            check_in = fake.date_between(start_date="+30d", end_date="+200d")
            rooming_list.bookings.append(
                Booking(
                    guest_name=fake.name(),
                    guest_phone=fake.phone_number()[:50],
                    check_in_date=check_in,
                    check_out_date=check_in + timedelta(days=fake.random_int(1, 5)),
                )
            )
        db_session.session.add(rooming_list)
        db_session.session.commit()
        return rooming_list

    return _create_rooming_list


@pytest.fixture
def rooming_record_factory():
    """
    Factory for rooming list records in the JSON shape of the listing API.

    Used to build mocked responses for the events view.
    """
    counter = {"next_id": 1}

    def _make_record(
        event_id: str = "E1",
        rfp_name: str | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        record_id = counter["next_id"]
        counter["next_id"] += 1
        cut_off = fake.date_between(start_date="+1d", end_date="+180d")
        record = {
            "roomingListId": record_id,
            "eventId": event_id,
            "eventName": f"Event {event_id}",
            "rfpName": rfp_name or f"{fake.last_name()} Group {record_id}",
            "agreementType": fake.random_element([a.value for a in AgreementType]),
            "cutOffDate": cut_off.isoformat(),
            "status": RfpStatus.ACTIVE.value,
            "bookingCount": 0,
        }
        record.update(overrides)
        return record

    return _make_record
