from __future__ import annotations

import sys

import click

from cleandeploy.runner import StepFailure, run_pipeline
from cleandeploy.ui.console import get_console
from cleandeploy.workflow import workflow


@click.command()
def cli():
    """Clean, build and deploy the project to Vercel (production)."""
    console = get_console()

    try:
        run_pipeline(workflow(), project_root=".")
    except StepFailure as e:
        console.print_failure(e.step, e.cmd, e.exit_code, hint=e.hint)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
