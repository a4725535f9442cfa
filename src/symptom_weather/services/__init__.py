"""Shared service utilities (HTTP client with retry)."""
