"""Seed bookings and charging history for a new app session."""

from vibrovolt.domain.models.charging import Booking, ChargingHistoryEntry

UPCOMING_BOOKINGS: tuple[Booking, ...] = (
    Booking(id="1", station="Hitech City", location="HITEC City, Madhapur", date="Today", time="2:00 PM - 3:00 PM"),
    Booking(id="2", station="Gachibowli", location="Financial District", date="Tomorrow", time="10:00 AM - 11:00 AM"),
)

CHARGING_HISTORY: tuple[ChargingHistoryEntry, ...] = (
    ChargingHistoryEntry(id="1", station="Banjara Hills", date="Dec 15, 2024", energy=45.2, amount=678),
    ChargingHistoryEntry(id="2", station="Charminar", date="Dec 14, 2024", energy=32.8, amount=492),
    ChargingHistoryEntry(id="3", station="Shamshabad RGIA", date="Dec 12, 2024", energy=28.5, amount=428),
)
