"""Configuration and progress helpers shared by the CLI and operations."""
