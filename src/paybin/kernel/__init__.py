"""Kernel – error hierarchy and gateway value types."""
