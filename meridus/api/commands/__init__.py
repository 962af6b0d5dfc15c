"""Forwarded Discord interaction resource."""
