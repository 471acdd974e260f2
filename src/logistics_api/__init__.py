"""Logistics delivery cost API."""
