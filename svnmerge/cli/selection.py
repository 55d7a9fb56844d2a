"""Interactive revision selection.

The flow walks a fixed sequence of prompts: merge direction, message mode,
one or two revision indices, and (for branch-to-trunk merges only) a task
number. Invalid answers re-prompt in place with no retry limit.

All input goes through ``input_func`` so tests can script the answers.
"""

import re
from dataclasses import dataclass
from typing import Callable

from svnmerge.message import MergeDirection, RevisionMode
from svnmerge.output import bold, dim, print_menu, warning
from svnmerge.svn import Revision

DIRECTION_CHOICES = {
    "1": MergeDirection.BRANCH_TO_TRUNK,
    "2": MergeDirection.TRUNK_TO_BRANCH,
}

MODE_CHOICES = {
    "1": RevisionMode.SINGLE,
    "2": RevisionMode.RANGE,
}

AFFIRMATIVE = {"y", "yes"}

INDEX_PATTERN = re.compile(r'[0-9]+')


def parse_index(answer: str) -> int:
    """Menu index typed by the user, or 0 when it isn't a plain ASCII number."""
    if not INDEX_PATTERN.fullmatch(answer):
        return 0
    try:
        return int(answer)
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return 0


@dataclass
class SelectionResult:
    """Everything the message builder needs from the user."""
    direction: MergeDirection
    mode: RevisionMode
    first: str
    second: str | None = None
    task_id: str | None = None


class SelectionFlow:
    """Prompts the user through direction, mode, revisions and task number."""

    def __init__(self, input_func: Callable[[str], str] = input):
        self._input = input_func

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _choose(self, choices: dict):
        while True:
            choice = self.ask("Enter choice (1 or 2): ")
            if choice in choices:
                return choices[choice]
            print(warning("Invalid choice. Please enter 1 or 2."))

    def select_direction(self) -> MergeDirection:
        print_menu("Please specify merge direction:", ["Branch to Trunk", "Trunk to Branch"])
        return self._choose(DIRECTION_CHOICES)

    def select_mode(self) -> RevisionMode:
        print_menu("Select commit message type:", ["Single revision", "Revision range (2 revisions)"])
        return self._choose(MODE_CHOICES)

    def select_revision(self, revisions: list[Revision], prompt: str | None = None) -> Revision:
        count = len(revisions)
        prompt = prompt or f"Select revision number (1-{count}): "
        while True:
            answer = self.ask(prompt)
            index = parse_index(answer)
            if 1 <= index <= count:
                return revisions[index - 1]
            print(warning(f"Invalid choice. Please enter a number between 1 and {count}."))

    def select_two_revisions(self, revisions: list[Revision]) -> tuple[Revision, Revision]:
        """Pick FIRST then SECOND; the pair is taken exactly as entered."""
        prompt = f"Enter number (1-{len(revisions)}): "

        print(bold("Select FIRST revision:"))
        first = self.select_revision(revisions, prompt)
        print(f"First: {first.number} - {first.message}")

        print(f"\n{bold('Select SECOND revision:')}")
        second = self.select_revision(revisions, prompt)
        print(f"Second: {second.number} - {second.message}")

        return first, second

    def ask_task_id(self) -> str:
        print("Branch to trunk required. Please insert your task number e.g, T123456.")
        return self.ask("Enter task number: ")

    def confirm(self, prompt: str = "Do you want to commit with this message? (y/N): ") -> bool:
        return self.ask(prompt).lower() in AFFIRMATIVE

    def select(self, revisions: list[Revision], direction: MergeDirection) -> SelectionResult:
        """Run mode, revision and task number prompts for a chosen direction."""
        mode = self.select_mode()

        if mode == RevisionMode.SINGLE:
            selected = self.select_revision(revisions)
            print(f"Selected: {selected.number} - {selected.message}")
            result = SelectionResult(direction=direction, mode=mode, first=selected.number)
        else:
            first, second = self.select_two_revisions(revisions)
            result = SelectionResult(direction=direction, mode=mode, first=first.number, second=second.number)

        if direction == MergeDirection.BRANCH_TO_TRUNK:
            result.task_id = self.ask_task_id()
        else:
            print(dim("Trunk to branch merge, no task number needed."))

        return result
