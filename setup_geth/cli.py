"""Command-line entry point."""

import asyncio
import logging
from typing import Optional

import typer

from .config import ActionSettings
from .core.pipeline import SetupPipeline, Stage
from .errors import SetupError
from .utils import setup_logging, workflow

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Install Geth on a CI runner and report the installed version.")


async def run_setup(settings: ActionSettings, token: str) -> int:
    """Run one setup and return the process exit code."""
    try:
        pipeline = SetupPipeline.from_settings(settings)
    except SetupError as e:
        e.stage = e.stage or Stage.START.value
        workflow.error(e.describe())
        return 1

    result = await pipeline.run(token)
    if not result.ok:
        workflow.error(result.error.describe())
        return 1

    logger.info("Geth %s is ready", result.installed_version)
    return 0


@app.command()
def main(
    version: Optional[str] = typer.Argument(None, help="latest, 1.13.5 or v1.13.5 (defaults to INPUT_VERSION)."),
    token: Optional[str] = typer.Option(None, "--token", help="GitHub token for release lookups."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to the console."),
) -> None:
    settings = ActionSettings()
    if token:
        settings = settings.model_copy(update={"token": token})

    log_file = setup_logging(settings.temp_dir / "setup-geth", verbose)
    logger.debug("Writing debug log to %s", log_file)

    exit_code = asyncio.run(run_setup(settings, version if version is not None else settings.version))
    raise typer.Exit(code=exit_code)
