"""
Core value types, calendar math and contracts.

Nothing here performs I/O; zone data is read through the ZoneRegistry.
"""
