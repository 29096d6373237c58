"""
Version string.
"""

VERSION = "0.1"
