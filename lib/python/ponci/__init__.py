"""Ponci module, poor man's cgroups interface."""
