"""Application wiring for the lightbnb data layer."""
