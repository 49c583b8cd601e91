"""Wagered two-seat UNO engine."""
