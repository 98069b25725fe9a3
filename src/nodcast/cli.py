"""CLI entry point for Nodcast."""

import asyncio
import sys
from enum import Enum
from pathlib import Path

import typer
import yaml
from rich.console import Console

from nodcast.config.logging import setup_logging
from nodcast.config.manager import ConfigManager
from nodcast.config.schema import SiteConfig
from nodcast.site import DataLoader, PageKind, Redirect, SiteBuilder, SiteRenderer
from nodcast.utils.errors import ConfigError, NodcastError, RenderError

app = typer.Typer(
    name="nodcast",
    help="Render the Nodcast podcast website from its episode data",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Inspect configuration", no_args_is_help=True)
app.add_typer(config_app, name="config")
console = Console()


class Part(str, Enum):
    """Fragment selector for the render command."""

    HEADER = "header"
    MAIN = "main"
    FOOTER = "footer"


def _load_config(ctx: typer.Context) -> SiteConfig:
    """Load the config and re-apply logging at its configured level."""
    options = ctx.obj or {}
    config = ConfigManager(options.get("config_file")).load_config()
    setup_logging(
        verbose=options.get("verbose", False),
        log_file=options.get("log_file"),
        level=config.log_level,
    )
    return config


def _make_renderer(config: SiteConfig, data: str | None) -> SiteRenderer:
    loader = DataLoader(
        source=data or config.data_source,
        site_root=config.site_root,
        timeout=config.request_timeout,
    )
    return SiteRenderer(loader, copyright_year=config.copyright_year)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="Path to nodcast.yaml"
    ),
) -> None:
    """Nodcast - static podcast site renderer."""
    ctx.obj = {"config_file": config_file, "verbose": verbose, "log_file": log_file}
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from nodcast import __version__

    console.print(f"[bold cyan]Nodcast[/bold cyan] v{__version__}")


@app.command("render")
def render_page(
    ctx: typer.Context,
    page: PageKind = typer.Argument(PageKind.HOME, help="Page kind: home or category"),
    category: str | None = typer.Argument(None, help="Category key (category pages)"),
    part: Part | None = typer.Option(
        None, "--part", "-p", help="Print only one fragment"
    ),
    data: str | None = typer.Option(
        None, "--data", "-d", help="Data document URL or path (overrides config)"
    ),
) -> None:
    """Render one page and print its fragments.

    Examples:
        nodcast render home

        nodcast render category sleep --part main
    """
    try:
        config = _load_config(ctx)
        renderer = _make_renderer(config, data)
        outcome = asyncio.run(renderer.init(page, category))

        if isinstance(outcome, Redirect):
            console.print(
                f"[yellow]⚠[/yellow] Category '{category}' not found, "
                f"redirect to {outcome.location}"
            )
            sys.exit(1)

        parts = [part.value] if part else [p.value for p in Part]
        for name in parts:
            # Plain print keeps markup untouched by rich
            print(getattr(outcome, name))

    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except RenderError as e:
        console.print(f"[red]✗[/red] Rendering failed: {e}")
        sys.exit(1)


@app.command("build")
def build_site(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output directory (overrides config)"
    ),
    data: str | None = typer.Option(
        None, "--data", "-d", help="Data document URL or path (overrides config)"
    ),
) -> None:
    """Write the home page and every category page to a directory."""
    try:
        config = _load_config(ctx)
        output_dir = output or config.output_dir
        builder = SiteBuilder(
            _make_renderer(config, data),
            output_dir=output_dir,
            stylesheet=config.stylesheet,
        )
        written = asyncio.run(builder.build())

        console.print(
            f"[green]✓[/green] Wrote {len(written)} page(s) to [bold]{output_dir}[/bold]"
        )
        for path in written:
            console.print(f"[dim]  {path.name}[/dim]")

    except NodcastError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]✗[/red] Cannot write site: {e}")
        sys.exit(1)


@config_app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Print the effective configuration as YAML."""
    try:
        config = _load_config(ctx)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)

    print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), end="")


if __name__ == "__main__":
    app()
