"""Core components for the pywgcheck application.

This package contains the section parser, the base class shared by the
section rule sets, the settings manager, and the two validation entry points.
"""
