# backend/modules/drink_dollars/__init__.py

"""
Drink Dollars loyalty balance, ledger and redemption cart.
"""
