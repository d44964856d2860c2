"""Metadata model tests."""
