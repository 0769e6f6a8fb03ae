"""Command-line entry point for the admin forms.

Usage:
    ADMIN_API_URL="https://grants.example.org" \
    grant-admin milestones --project 42 milestones.yaml

    ADMIN_API_URL="https://grants.example.org" \
    grant-admin project project.json

Toasts and navigation are written to the log, the way a browser would
show them. Exit status is 0 when the form advances, 1 otherwise.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .api import AdminApiClient
from .config import load_config
from .drafts import DraftList, load_drafts, load_mapping
from .notify import NavigationLog, ToastLog
from .submission import Action, MilestoneForm, ProjectForm

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


async def create_milestones(project_id: int, drafts_file: str) -> bool:
    """Load drafts from a file and run them through the milestone form."""
    config = load_config()
    logging.getLogger().setLevel(config.log_level)

    drafts = DraftList(load_drafts(drafts_file))
    logger.info(f"Loaded {len(drafts)} milestone draft(s) from {drafts_file}")

    async with AdminApiClient.from_config(config) as client:
        form = MilestoneForm(project_id, client, ToastLog(), NavigationLog(), drafts=drafts)
        if await form.load() is None:
            return False
        decision = await form.submit()

    return decision is not None and decision.action is Action.ADVANCE


async def create_project(fields_file: str) -> bool:
    """Create a project from a JSON/YAML mapping of form fields."""
    config = load_config()
    logging.getLogger().setLevel(config.log_level)

    values = load_mapping(fields_file)
    if not isinstance(values, dict):
        raise ValueError(f"Expected a mapping of project fields in {fields_file}")

    async with AdminApiClient.from_config(config) as client:
        form = ProjectForm(client, ToastLog(), NavigationLog(), values=values)
        decision = await form.submit()

    return decision.action is Action.ADVANCE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grant-admin", description="Grant project admin tools")
    commands = parser.add_subparsers(dest="command", required=True)

    milestones = commands.add_parser("milestones", help="Create milestones for a project")
    milestones.add_argument("--project", type=int, required=True, help="Parent project id")
    milestones.add_argument("file", help="JSON or YAML list of milestones")

    project = commands.add_parser("project", help="Create a project")
    project.add_argument("file", help="JSON or YAML mapping of project form fields")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "milestones":
            ok = asyncio.run(create_milestones(args.project, args.file))
        else:
            ok = asyncio.run(create_project(args.file))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
