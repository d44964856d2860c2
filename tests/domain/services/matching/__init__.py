"""Matching service tests."""
