"""Minimum-weight path search algorithms."""
