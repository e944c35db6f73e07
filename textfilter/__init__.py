"""
textfilter — pluggable text filters for user-authored content.
"""

__version__ = "0.1.0"
