"""Tooling, jog commands, simulation stepping and viewport cameras for CNC machining simulation."""

__version__ = "0.1.0"