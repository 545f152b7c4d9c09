"""Kernel – error hierarchy and time helpers shared by every reqlog layer."""
