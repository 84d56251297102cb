"""Main CLI entry point.

File: mcpc/cli/main.py
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from mcpc import __version__
from mcpc.core.options import Language, OptionError, ProjectSpec, build_project_spec
from mcpc.core.project import ProjectError, ProjectReport, create_project
from mcpc.core.template import TOOL_COMMANDS, TemplateError
from mcpc.utils.dependencies import MissingDependencyError

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_INVALID_ARGS = 1
EXIT_MISSING_DEPENDENCY = 2
EXIT_WRITE_ERROR = 3

def setup_logging(debug: bool = False) -> None:
    """Configure logging with proper format."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

def print_missing_dependencies(error: MissingDependencyError) -> None:
    click.echo(click.style("❌ Missing required dependencies:", fg="red", bold=True), err=True)
    for dep in error.missing:
        click.echo(f"  - {click.style(dep.name, fg='yellow')}", err=True)
        if dep.install_instructions:
            click.echo(
                f"    {click.style('Install with', fg='blue')}: "
                f"{click.style(dep.install_instructions, fg='green')}",
                err=True
            )

def print_next_steps(spec: ProjectSpec) -> None:
    commands = TOOL_COMMANDS[spec.tool]
    click.echo(click.style("🚀 Next steps:", fg="yellow", bold=True))
    click.echo(f"  cd {spec.name}")

    if spec.language is Language.PYTHON:
        click.echo(click.style("  # Activate virtual environment", dim=True))
        click.echo("  source .venv/bin/activate  # On Windows: .venv\\Scripts\\activate")
        click.echo(click.style("  # Install dependencies", dim=True))
        click.echo(f"  {commands['install']}")
        click.echo(click.style("  # Check the server works without an MCP client", dim=True))
        click.echo("  python server.py --test")
    else:
        click.echo(click.style("  # Install dependencies", dim=True))
        click.echo(f"  {commands['install']}")
        click.echo(click.style("  # Run the server", dim=True))
        click.echo(f"  {commands['dev']}")

def print_report(report: ProjectReport) -> None:
    spec = report.spec
    click.echo(
        f"{click.style('✅', fg='green', bold=True)} Successfully created MCP server project: "
        f"{click.style(spec.name, fg='green', bold=True)}"
    )
    click.echo(
        f"{click.style('📁', fg='blue', bold=True)} Project location: "
        f"{click.style(str(report.project_dir), fg='blue')}"
    )
    for warning in report.warnings:
        click.echo(f"⚠️  Warning: {warning}", err=True)
    print_next_steps(spec)

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument('project_name', required=False)
@click.option('--language', '-l', envvar='MCPC_LANGUAGE', type=str,
              help='Language: ts or py (default: ts, env: MCPC_LANGUAGE)')
@click.option('--tool', '-t', envvar='MCPC_TOOL', type=str,
              help='Package manager: pnpm, yarn, npm or uv (env: MCPC_TOOL)')
@click.option('--path', '-p', 'base_dir', envvar='MCPC_PATH',
              type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
              help='Parent directory. Defaults to current directory.')
@click.option('--install/--no-install', envvar='MCPC_INSTALL', default=True,
              help='Install dependencies after generating files')
@click.option('--git/--no-git', envvar='MCPC_GIT', default=True,
              help='Initialize a git repository')
@click.option('--verify/--no-verify', envvar='MCPC_VERIFY', default=False,
              help='Build the generated project to check it works')
@click.option('--debug/--no-debug', envvar='MCPC_DEBUG', default=False,
              help='Enable debug logging')
@click.version_option(__version__, '--version', '-V', prog_name='mcpc')
def cli(
    project_name: Optional[str],
    language: Optional[str],
    tool: Optional[str],
    base_dir: Optional[Path],
    install: bool,
    git: bool,
    verify: bool,
    debug: bool
) -> None:
    """Generate an MCP server project named PROJECT_NAME."""
    setup_logging(debug)

    try:
        spec = build_project_spec(project_name, language, tool)
        report = create_project(spec, base_dir, install=install, git=git, verify=verify)

    except OptionError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(EXIT_INVALID_ARGS)
    except MissingDependencyError as e:
        print_missing_dependencies(e)
        sys.exit(EXIT_MISSING_DEPENDENCY)
    except (TemplateError, ProjectError) as e:
        click.echo(f"❌ Failed to create project: {e}", err=True)
        if debug:
            raise
        sys.exit(EXIT_WRITE_ERROR)

    print_report(report)

if __name__ == '__main__':
    cli()
