# backend/modules/bookings/__init__.py

"""
Venue bookings, Drink Dollars redemptions and arrival verification.
"""
