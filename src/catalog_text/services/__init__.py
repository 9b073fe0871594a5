"""Business logic for texts and commodities."""
