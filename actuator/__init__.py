"""Guru Actuator management service package."""
