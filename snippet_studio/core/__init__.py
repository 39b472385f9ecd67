"""Configuration and security helpers shared across the service."""
