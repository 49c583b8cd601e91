"""Interfaces to the world outside the engine."""
