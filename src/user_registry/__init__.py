"""User registry API."""
