"""
Component objects for the regions of the events page.

Unlike page objects these are scoped to a root locator, so one class
serves every card, carousel or filter option on the page.
"""

from tests.e2e.pages.components.bookings_modal import BookingsModal
from tests.e2e.pages.components.card import Card, CardSnapshot, CutOffDate
from tests.e2e.pages.components.carousel import Carousel
from tests.e2e.pages.components.filter_checkbox import FilterCheckbox, FilterState

__all__ = [
    "BookingsModal",
    "Card",
    "CardSnapshot",
    "Carousel",
    "CutOffDate",
    "FilterCheckbox",
    "FilterState",
]
