"""Utility subpackages for sprm."""
