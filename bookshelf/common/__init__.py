"""Process-wide helpers shared by the API and the maintenance scripts."""
