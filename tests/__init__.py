"""Unit tests for the redis mock adapter."""
