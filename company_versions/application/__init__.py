"""Application services for the company version log."""
