"""Services Layer: store access for each resource.

Invariants:
    - Services receive an AsyncSession; they never create or close one
    - Services raise core/errors.py types; routes translate nothing themselves
"""
