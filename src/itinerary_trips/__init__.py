"""Reconstruct trips from itinerary files."""
