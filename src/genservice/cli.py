"""Main CLI entry point for genservice."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from genservice import __version__
from genservice.core.config import GeneratedProject, ScaffoldRequest
from genservice.core.manifest import ManifestError
from genservice.core.scaffolder import Scaffolder, ScaffoldError
from genservice.git.utils import (
    GitCommandError,
    GitError,
    GitNotInstalledError,
)
from genservice.npm.utils import (
    NpmCommandError,
    NpmError,
    NpmNotInstalledError,
)

PROG_NAME = "generate-service"

# Shell convention for "command not found"
EXIT_NOT_INSTALLED = 127

console = Console()
err_console = Console(stderr=True)


@click.command(name=PROG_NAME)
@click.argument("names", nargs=-1, metavar="PROJECT_NAME")
@click.version_option(version=__version__, prog_name=PROG_NAME)
def main(names: tuple):
    """Generate a minimal Express + TypeScript web service.

    PROJECT_NAME is the directory to create in the current directory.

    \b
    The new project contains:
      tsconfig.json        TypeScript compiler configuration
      Dockerfile           Container image for the service
      src/index.ts         Express app with / and /uuid routes
      .env, .gitignore     PORT default and ignore rules
      package.json         build, start and dev scripts
    """
    if len(names) != 1 or not names[0]:
        _usage()

    name = names[0]

    console.print(Panel.fit(
        f"[bold blue]{PROG_NAME}[/] - Creating [cyan]{escape(name)}[/]",
        border_style="blue"
    ))

    try:
        project = Scaffolder().run(
            ScaffoldRequest(name),
            parent_dir=Path.cwd(),
            show_progress=True,
        )
    except ScaffoldError as e:
        _fail(str(e))
    except (GitNotInstalledError, NpmNotInstalledError) as e:
        _fail(str(e), EXIT_NOT_INSTALLED)
    except (GitCommandError, NpmCommandError) as e:
        _relay_output(e)
        _fail(str(e).splitlines()[0], exit_status(e.returncode))
    except (GitError, NpmError, ManifestError) as e:
        _fail(str(e))

    _print_next_steps(project)


def exit_status(returncode: int) -> int:
    """Exit status for a failed child, 128+N when it died from signal N."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def _usage():
    """Print usage and exit 1."""
    err_console.print(f"Usage: {PROG_NAME} <project_name>", markup=False, highlight=False)
    raise SystemExit(1)


def _fail(message: str, code: int = 1):
    err_console.print(f"[red]Error:[/] {escape(message)}", soft_wrap=True)
    raise SystemExit(code)


def _relay_output(error):
    """Pass a failed command's own diagnostics through untouched."""
    output = getattr(error, "stderr", "") or getattr(error, "stdout", "")
    if output:
        click.echo(output.rstrip("\n"), err=True)


def _print_next_steps(project: GeneratedProject):
    """Print next steps after creation."""
    lines = [
        f"Project '{project.name}' has been created successfully.",
        "Next steps:",
        f"1. Navigate to the project directory: cd {project.name}",
        "2. Install dependencies if not already installed: npm install",
        "3. Build the project: npm run build",
        "4. Run the project: npm start",
    ]
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)

    if "dev" in project.scripts:
        console.print("\n[dim]During development, `npm run dev` restarts on changes.[/]")


if __name__ == "__main__":
    main()
