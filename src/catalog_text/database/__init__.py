"""Cosmos DB access."""
