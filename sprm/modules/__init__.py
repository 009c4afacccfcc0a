"""Filename transformation modules."""
