"""CLI Commands"""

from svnmerge.config import Config, get_config_path, get_env_overrides, save_config
from svnmerge.cli.selection import SelectionFlow
from svnmerge.cli.utils import display_revisions, manual_commit_command
from svnmerge.message import MergeDirection, build_message
from svnmerge.output import bold, dim, info, print_error, print_heading, print_success
from svnmerge.svn import SvnClient, SvnError

NEXT_STEP_COMMAND = "svnmerge generate-commit"


def display_config(config: Config) -> int:
    """Display the resolved configuration."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .svnmergerc found)")

    env_overrides = get_env_overrides()
    if env_overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in env_overrides.items():
            print(f"    {name}={value}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    repo_base:         {info(config.repo_base or '(empty)')}")
    print(f"    branch_path:       {info(config.branch_path or '(empty)')}")
    print(f"    local_repo_path:   {info(config.local_repo_path or '(empty)')}")
    print(f"    log_limit:         {info(str(config.log_limit))}")

    print()
    print(f"  {bold('Derived:')}")
    print(f"    trunk url:         {config.trunk_url}")
    print(f"    branch url:        {config.branch_url}")
    print(f"    local trunk:       {config.local_trunk_path}")
    print(f"    local branch:      {config.local_branch_path}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .svnmergerc (in current directory)")
    print(f"    Global: ~/.svnmergerc")
    print(f"    Env:    REPO_BASE, BRANCH_PATH, LOCAL_REPO_PATH (or a .env file)")
    print(f"\n  {dim('Run')} svnmerge setup {dim('to configure')}\n")

    return 0


def run_setup(config: Config, input_func=input) -> int:
    """Quick setup wizard."""
    print(f"{bold('Setup Wizard')}\n")

    def ask(label: str, current: str) -> str:
        shown = f" [{current}]" if current else ""
        return input_func(f"{label}{shown}: ").strip() or current

    repo_base = ask("Repository base URL (e.g. https://svn.example.com/project)", config.repo_base)
    branch_path = ask("Branch path (e.g. /branches/feature-x)", config.branch_path)
    local_repo_path = ask("Local checkout root", config.local_repo_path)

    limit_input = input_func(f"Revisions to list (Enter for {config.log_limit}): ").strip()
    log_limit = int(limit_input) if limit_input.isdigit() and int(limit_input) > 0 else config.log_limit

    new_config = Config(
        repo_base=repo_base,
        branch_path=branch_path,
        local_repo_path=local_repo_path,
        log_limit=log_limit,
    )
    path = save_config(new_config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def _merge(client: SvnClient, target_dir: str, source_dir: str, source_url: str) -> int:
    """Update both working copies, then merge source_url into target_dir."""
    try:
        client.update(target_dir)
        client.update(source_dir)

        print(f"Merging {source_url} into {target_dir}...")
        client.merge(target_dir, source_url)
    except SvnError as e:
        print_error(f"Merge failed: {e}")
        return 1

    print_success("Merge successful!")

    print()
    print_heading("Checking merge status")
    client.status(target_dir)

    print("\nMerge completed! To commit, run:")
    print(f"  {NEXT_STEP_COMMAND}")
    return 0


def run_branch_to_trunk(config: Config, client: SvnClient) -> int:
    print_heading("Starting merge of branch to trunk")
    return _merge(client, config.local_trunk_path, config.local_branch_path, config.branch_url)


def run_trunk_to_branch(config: Config, client: SvnClient) -> int:
    print_heading("Starting merge of trunk to branch")
    return _merge(client, config.local_branch_path, config.local_trunk_path, config.trunk_url)


def run_show_revisions(config: Config, client: SvnClient, path: str, url: str, remote: bool = False) -> int:
    """Dump recent verbose history for a working copy or straight from its URL."""
    try:
        if remote:
            print_heading(f"Getting latest revisions directly from remote: {url}")
            client.log_remote(url, config.log_limit)
        else:
            print_heading(f"Getting recent revisions for: {url}")
            client.try_update(path)
            client.log_verbose(path, config.log_limit)
    except SvnError as e:
        print_error(f"Failed to get revisions: {e}")
        return 1
    return 0


def commit_target(config: Config, direction: MergeDirection) -> str:
    """The working copy that received the merge."""
    if direction == MergeDirection.BRANCH_TO_TRUNK:
        return config.local_trunk_path
    return config.local_branch_path


def history_source(config: Config, direction: MergeDirection) -> str:
    """The working copy whose history the merged revisions come from."""
    if direction == MergeDirection.TRUNK_TO_BRANCH:
        return config.local_trunk_path
    return config.local_branch_path


def run_generate_commit(config: Config, client: SvnClient, flow: SelectionFlow | None = None) -> int:
    """Pick revisions, build the merge message and optionally commit it.

    Returns:
        int: Exit code
    """
    flow = flow or SelectionFlow()
    print_heading("Generate Commit Message")

    direction = flow.select_direction()
    print(f"Merge direction: {info(direction.value)}")

    source_path = history_source(config, direction)
    side = "trunk" if direction == MergeDirection.TRUNK_TO_BRANCH else "branch"
    print(f"Getting {side} revisions...")

    try:
        revisions = client.recent_revisions(source_path, config.log_limit)
    except SvnError as e:
        print_error(f"Failed to get revisions: {e}")
        return 1

    if not revisions:
        print_error("No revisions found")
        return 1

    display_revisions(revisions)

    result = flow.select(revisions, direction)
    message = build_message(result, config.branch_label)

    print(f"\n{bold('Generated commit message:')}")
    print(f'"{message}"\n')

    if not flow.confirm():
        print("Commit cancelled. You can commit manually later with:")
        print(manual_commit_command(message))
        return 0

    target_dir = commit_target(config, direction)
    print(f"Committing changes in {'trunk' if direction == MergeDirection.BRANCH_TO_TRUNK else 'branch'} directory: {target_dir}")
    try:
        client.commit(target_dir, message)
    except SvnError as e:
        print_error(f"Commit failed: {e}")
        return 1

    print_success("Commit successful!")
    return 0
