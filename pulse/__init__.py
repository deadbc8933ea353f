"""Pulse event and ticketing backend.

The package is split into ``domain`` (plain entities), ``infrastructure``
(persistence, gateways and background services), ``application`` (use cases)
and ``interfaces`` (the FastAPI surface).
"""
