"""
Exception class for the anchorlib package.
"""


class AnchorError(Exception):
    """Trust anchor data error"""
    pass
