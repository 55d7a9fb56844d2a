"""CLI Utility Functions"""

from svnmerge.output import dim, print_heading, table_rule
from svnmerge.svn import Revision

MAX_AUTHOR_WIDTH = 15
ELLIPSIS = "..."

# No. | Revision | Author | Message
COLUMN_WIDTHS = [3, 8, MAX_AUTHOR_WIDTH, 40]

TABLE_HEADER = f"{'No.':<3} | {'Revision':<8} | {'Author':<15} | Message"
TABLE_RULE = table_rule(COLUMN_WIDTHS)


def truncate_author(author: str, width: int = MAX_AUTHOR_WIDTH) -> str:
    """Shorten an author name for the table, keeping the stored value intact."""
    if len(author) > width:
        return author[:width - len(ELLIPSIS)] + ELLIPSIS
    return author


def format_revision_row(index: int, revision: Revision) -> str:
    return f"{index:<3} | {revision.number:<8} | {truncate_author(revision.author):<15} | {revision.message}"


def display_revisions(revisions: list[Revision]) -> None:
    """Print revisions as a numbered table, in the order given."""
    print()
    print_heading("Available Revisions")
    print(TABLE_HEADER)
    print(dim(TABLE_RULE))
    for i, revision in enumerate(revisions, 1):
        print(format_revision_row(i, revision))
    print()


def manual_commit_command(message: str) -> str:
    """The svn command a user can run to commit later."""
    return f'svn commit -m "{message}"'
