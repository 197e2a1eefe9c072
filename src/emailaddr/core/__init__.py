"""Core layer: results, error base, enums, constants and settings."""
