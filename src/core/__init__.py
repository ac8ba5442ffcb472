"""
Core value objects, money primitives and payload contracts.

Nothing here depends on I/O or the reporting layer.
"""
