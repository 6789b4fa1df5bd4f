"""Domain layer of the company version log."""
