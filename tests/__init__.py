"""Test suite for the user directory."""
