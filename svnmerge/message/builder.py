"""Message Builder - Render merge commit messages."""

from enum import Enum, IntEnum


class MergeDirection(str, Enum):
    """Which side changes flow from."""
    BRANCH_TO_TRUNK = "branch-to-trunk"
    TRUNK_TO_BRANCH = "trunk-to-branch"


class RevisionMode(IntEnum):
    """How many revisions the message refers to (values match the menu)."""
    SINGLE = 1
    RANGE = 2


FALLBACK_MESSAGE = "Merge commit"

# Lookup table: (mode, direction) -> template
MESSAGE_TEMPLATES: dict[tuple[RevisionMode, MergeDirection], str] = {
    (RevisionMode.SINGLE, MergeDirection.TRUNK_TO_BRANCH):
        "Merged {first} from trunk to {branch}",
    (RevisionMode.SINGLE, MergeDirection.BRANCH_TO_TRUNK):
        "Merged {first} from {branch} to trunk ({task_id})",
    (RevisionMode.RANGE, MergeDirection.TRUNK_TO_BRANCH):
        "Merged branches {first} - {second} from trunk to {branch}",
    (RevisionMode.RANGE, MergeDirection.BRANCH_TO_TRUNK):
        "Merged branches {first} - {second} from {branch} to trunk ({task_id})",
}


def generate_commit_message(
    mode: RevisionMode,
    direction: MergeDirection,
    first: str,
    second: str | None,
    task_id: str | None,
    branch_label: str,
) -> str:
    """Build the commit message for a merge.

    Any (mode, direction) pair outside the table yields FALLBACK_MESSAGE.
    The selection menus only produce table keys, so the fallback is dead
    in practice but kept as the default of the lookup.
    """
    template = MESSAGE_TEMPLATES.get((mode, direction))
    if template is None:
        return FALLBACK_MESSAGE
    return template.format(
        first=first,
        second=second or "",
        task_id=task_id or "",
        branch=branch_label,
    )


def build_message(result, branch_label: str) -> str:
    """Render a SelectionResult."""
    return generate_commit_message(
        result.mode,
        result.direction,
        result.first,
        result.second,
        result.task_id,
        branch_label,
    )
