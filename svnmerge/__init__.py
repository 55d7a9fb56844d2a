"""
SVN Merge Tool

Merge between trunk and a tracked branch and compose consistent merge commit messages.
"""

__version__ = "1.0.0"

# Default number of log entries fetched for selection and history views
DEFAULT_LOG_LIMIT = 10
