"""CLI for git-build-source."""

import json
import sys
from pathlib import Path

import click
import structlog

from git_build_source.config.logging import configure_logging
from git_build_source.config.settings import get_settings
from git_build_source.config.store import BuildConfiguration, HierarchicalConfiguration
from git_build_source.core.exceptions import CommandExecutionError
from git_build_source.core.models import (
    GIT_BRANCH,
    GIT_REPO_URL,
    WEB_REPO_URL,
    Commit,
    CommitFile,
    ConfigMode,
    ErrorCollection,
    RepositoryConfig,
)
from git_build_source.git.executor import SubprocessCommandExecutor
from git_build_source.git.url_resolver import normalize_remote_url

logger = structlog.get_logger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """git-build-source: GitHub repositories as CI build sources."""
    settings = get_settings()
    log_level = "DEBUG" if verbose or settings.debug else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command()
@click.option("--repository-url", "-r", default="", help="Clone URL of the repository")
@click.option("--branch", "-b", default="", help="Branch to build (default: from settings)")
@click.option("--web-url", "-w", default="", help="GitHub web URL of the repository")
def validate(repository_url: str, branch: str, web_url: str) -> None:
    """Validate a build source configuration.

    Prints the configuration that would be persisted, or the field errors.
    """
    settings = get_settings()

    pending = BuildConfiguration()
    pending.set(GIT_REPO_URL, repository_url)
    pending.set(GIT_BRANCH, branch)
    pending.set(WEB_REPO_URL, web_url)

    repository = RepositoryConfig()
    errors = ErrorCollection()
    for mode in ConfigMode:
        repository.add_default_values(pending, mode, default_branch=settings.default_branch)
        repository.validate(errors, pending, mode)

    if errors.has_any_errors():
        click.echo(f"Found {errors.total_errors} error(s):", err=True)
        for field, message in sorted(errors.field_errors.items()):
            click.echo(f"  {field}: {message}", err=True)
        sys.exit(1)

    for mode in ConfigMode:
        repository.populate_from_config(pending, mode)

    if repository.repository_url and not repository.web_repository_url:
        suggestion = normalize_remote_url(repository.repository_url)
        if suggestion.startswith("https://github.com/"):
            click.echo(f"Hint: web repository URL could be {suggestion}", err=True)

    persisted = HierarchicalConfiguration()
    for mode in ConfigMode:
        repository.to_configuration(persisted, mode)
    logger.info("Build source configuration is valid", host=repository.host)
    click.echo(json.dumps(persisted.to_dict(), indent=2))


@cli.command()
@click.argument("web_url")
@click.argument("revision")
@click.argument("path", required=False)
def links(web_url: str, revision: str, path: str | None) -> None:
    """Print GitHub links for a revision and, optionally, a file in it."""
    repository = RepositoryConfig(web_repository_url=web_url)
    if not repository.has_web_based_repository_access():
        click.echo(f"Error: Not a GitHub web URL: {repository.web_repository_url}", err=True)
        sys.exit(1)

    commit_file = CommitFile(revision=revision, name=path or "")
    commit = Commit(files=[commit_file])

    click.echo(f"Commit: {repository.get_web_repository_url_for_commit(commit)}")
    if path:
        click.echo(f"File:   {repository.get_web_repository_url_for_file(commit_file)}")
        click.echo(f"Diff:   {repository.get_web_repository_url_for_diff(commit_file)}")


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--cwd",
    "-C",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    help="Working directory",
)
@click.argument("git_args", nargs=-1, type=click.UNPROCESSED)
def run(cwd: Path, git_args: tuple[str, ...]) -> None:
    """Run a git command and print its output."""
    settings = get_settings()
    executor = SubprocessCommandExecutor(timeout=settings.command_timeout)

    try:
        output = executor.execute([settings.git_binary, *git_args], cwd)
    except CommandExecutionError as exc:
        click.echo(f"Error: {exc}", err=True)
        if exc.stderr:
            click.echo(exc.stderr.rstrip(), err=True)
        sys.exit(1)

    click.echo(output, nl=False)


if __name__ == "__main__":
    cli()
