"""Endpoint handlers for the HUB mock."""
