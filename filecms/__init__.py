"""
filecms - role-based access control over a persisted file store.
"""

__version__ = "1.0.0"
