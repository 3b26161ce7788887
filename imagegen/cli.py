"""Command-line front-end for the image generation proxy."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .studio import ImageStudio

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Logging level",
)
def cli(log_level: str) -> None:
    """Generate images with Gemini through the local proxy."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command("generate")
@click.argument("prompt")
@click.option("--base-url", default=None, help="Proxy base URL (defaults to IMAGEGEN_PROXY_BASE_URL)")
@click.option(
    "--out",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory the generated image is saved to",
)
def generate_cli(prompt: str, base_url: str | None, out: Path) -> None:
    """Submit PROMPT and save the returned image.

    Example:
        imagegen generate "a red cube on a marble floor" --out images/
    """
    if not prompt.strip():
        raise click.UsageError("Prompt must not be empty")

    studio = ImageStudio(base_url=base_url)

    click.echo("Dreaming up your image...")
    state = studio.submit(prompt)

    if state.error:
        label = f"Error ({state.error_status})" if state.error_status else "Error"
        click.secho(f"{label}: {state.error}", fg="red", err=True)
        if state.error_details:
            click.echo(state.error_details, err=True)
        raise SystemExit(1)

    path = studio.download(out)
    click.echo(f"Saved {path}")


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve_cli(host: str, port: int, reload: bool) -> None:
    """Run the generation proxy."""
    import uvicorn

    uvicorn.run("imagegen.main:app", host=host, port=port, reload=reload)


def main() -> None:  # pragma: no cover - console script
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
