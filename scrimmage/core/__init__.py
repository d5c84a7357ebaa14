"""Core domain models for the play engine."""
