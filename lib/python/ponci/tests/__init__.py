"""Ponci unit tests.
"""
