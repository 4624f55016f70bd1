"""Framework adapters for todoql."""
