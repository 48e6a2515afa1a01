"""Tooling helpers for the hello world action."""
