"""SVN Operations Package"""

from svnmerge.svn.client import SvnClient, SvnError
from svnmerge.svn.log_parser import Revision, parse_log, LOG_DIVIDER, MAX_MESSAGE_LENGTH

__all__ = [
    "SvnClient",
    "SvnError",
    "Revision",
    "parse_log",
    "LOG_DIVIDER",
    "MAX_MESSAGE_LENGTH",
]
