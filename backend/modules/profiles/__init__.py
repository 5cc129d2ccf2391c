# backend/modules/profiles/__init__.py

"""
Customer and venue manager accounts.
"""
