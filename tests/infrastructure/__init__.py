"""Test infrastructure: in-memory doubles shared by the unit and integration tests.

This package contains test support code, NOT actual tests.
"""
