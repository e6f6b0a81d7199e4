"""Shared utilities for focalcrop."""
