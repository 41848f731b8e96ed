"""Shared utilities for hicframe."""
