"""Discrete-time eVTOL fleet simulation: vehicles, fleet, chargers, faults and per-type statistics."""

__version__ = "0.1.0"