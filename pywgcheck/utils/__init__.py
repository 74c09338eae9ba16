"""Utility modules for pywgcheck.

Helpers that sit next to validation without being part of it, such as
rendering a validated form record back into configuration text.
"""
