"""E-BRD backend package."""
