"""Command-line interface for the PR labeler."""

from __future__ import annotations

import json
import sys

import click
import yaml
from pydantic import ValidationError

from pr_labeler import __version__
from pr_labeler.config import AppConfig, ConfigManager
from pr_labeler.exceptions import ConfigError, LabelerError
from pr_labeler.labeler import PullRequestLabeler
from pr_labeler.labeling.classifier import PathClassifier
from pr_labeler.models.event import PullRequestEvent
from pr_labeler.models.pr_files import ChangedFile, FileStatus


def _load_config(config_path: str | None, dry_run: bool) -> AppConfig:
    config = AppConfig.from_yaml(config_path) if config_path else AppConfig.from_env()
    if dry_run:
        config.labeling.dry_run = True
    ConfigManager(config)
    return config


def _load_event(event_path: str | None) -> PullRequestEvent | None:
    if not event_path:
        return None
    with open(event_path, encoding="utf-8") as f:
        payload = json.load(f)
    return PullRequestEvent.model_validate(payload)


@click.group()
@click.version_option(version=__version__, prog_name="pr-labeler")
def main():
    """Label pull requests based on the files they change."""


@main.command()
@click.option("--pr", "pr_number", type=int, default=None, help="Pull request number (default: from event)")
@click.option("--repo", default=None, help="Repository as owner/repo (default: GITHUB_REPOSITORY or event)")
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="GitHub event payload (default: GITHUB_EVENT_PATH)",
)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="YAML config file")
@click.option("--dry-run", is_flag=True, help="Compute labels without changing the PR")
def run(pr_number: int | None, repo: str | None, event_path: str | None,
        config_path: str | None, dry_run: bool):
    """Evaluate one pull request and reconcile its labels."""
    try:
        config = _load_config(config_path, dry_run)
    except (ConfigError, FileNotFoundError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        event = _load_event(event_path)
    except (OSError, ValueError, ValidationError) as e:
        click.echo(f"Error: could not read event payload: {e}", err=True)
        sys.exit(1)

    if pr_number is None and event is not None:
        pr_number = event.pr_number
    repository = repo or config.github.repository or (event.repository_name if event else None)

    if not pr_number:
        click.echo("Could not determine PR number, skipping")
        return
    if not repository:
        click.echo("Error: repository is required (--repo or GITHUB_REPOSITORY)", err=True)
        sys.exit(1)

    try:
        labeler = PullRequestLabeler.from_config(config, repository=repository)
        outcome = labeler.evaluate(pr_number)
    except (LabelerError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if outcome.status == "skipped":
        click.echo(f"PR #{pr_number}: skipped ({outcome.reason})")
        return

    prefix = "Would add" if outcome.dry_run else "Added"
    click.echo(f"PR #{pr_number}: {prefix}: {', '.join(sorted(outcome.added)) or 'nothing'}")
    prefix = "Would remove" if outcome.dry_run else "Removed"
    click.echo(f"PR #{pr_number}: {prefix}: {', '.join(sorted(outcome.removed)) or 'nothing'}")


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--status",
    type=click.Choice([status.value for status in FileStatus if status is not FileStatus.RENAMED]),
    default=FileStatus.MODIFIED.value,
    show_default=True,
    help="Status to classify the paths with",
)
def classify(paths: tuple[str, ...], status: str):
    """Show the label each path would get."""
    classifier = PathClassifier()
    for path in paths:
        label = classifier.classify(ChangedFile(filename=path, status=FileStatus(status)))
        click.echo(f"{path}: {label.value if label else '-'}")


if __name__ == "__main__":
    main()
