"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bibcite import __version__
from bibcite.cli.config import load_config
from bibcite.cli.plugin import run_plugin
from bibcite.core.config import CitationStyle
from bibcite.core.models import Bibliography
from bibcite.documents.models import Document
from bibcite.operations.render import RenderReport, render_documents

logger = logging.getLogger(__name__)


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    config_path: Path | None = None
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags.

    Log records go to stderr so ``bibcite plugin`` keeps stdout clean.
    """
    if quiet:
        level = logging.ERROR
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_console(
    no_color: bool = False, width: int | None = None, stderr: bool = False
) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
        stderr=stderr,
    )


class BibciteGroup(click.Group):
    """Custom group that reports errors instead of tracebacks."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            create_console(stderr=True).print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            create_console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}")
            ctx.exit(1)


@click.group(cls=BibciteGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress warnings")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="bibcite", message="bibcite version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Citation rendering for Markdown documents.

    Replaces @key citation markers with formatted citations and inserts
    a reference list at the placeholder.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        config_path=config,
        debug=debug,
    )


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Write rendered files here instead of in place",
)
@click.option(
    "--bibliography",
    "-b",
    type=click.Path(dir_okay=False),
    help="BibTeX file to cite from",
)
@click.option(
    "--style",
    "-s",
    type=click.Choice([s.value for s in CitationStyle]),
    help="Citation style",
)
@click.option("--refs-file", "-r", help="Document receiving the combined reference list")
@click.option("--placeholder", help="Line marker replaced by the reference list")
@click.option(
    "--render-key/--no-render-key", default=None, help="Show keys in the reference list"
)
@click.option(
    "--link-refs/--no-link-refs", default=None, help="Link citations to references"
)
@click.option("--dry-run", is_flag=True, help="Render without writing any file")
@click.pass_context
def render(
    ctx: click.Context,
    files: tuple[Path, ...],
    output_dir: Path | None,
    bibliography: str | None,
    style: str | None,
    refs_file: str | None,
    placeholder: str | None,
    render_key: bool | None,
    link_refs: bool | None,
    dry_run: bool,
) -> None:
    """Render citations in Markdown FILES."""
    console = ctx.obj.console

    config = load_config(
        ctx.obj.config_path,
        {
            "bibliography": bibliography,
            "style": style,
            "refs-file": refs_file,
            "placeholder": placeholder,
            "render-key": render_key,
            "link-refs": link_refs,
        },
    )
    bib = Bibliography.load(config.bibliography)

    documents = {
        path: Document.from_markdown(path.read_text(encoding="utf-8")) for path in files
    }
    report = render_documents(documents, bib, config)

    if not dry_run:
        for path, document in documents.items():
            target = _output_path(path, output_dir)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(document.to_markdown(), encoding="utf-8")
            logger.debug(f"Wrote {target}")

    _print_report(console, report, dry_run)


@cli.command()
def plugin() -> None:
    """Run as a JSON pre-processor on stdin/stdout."""
    run_plugin(sys.stdin, sys.stdout)


def _output_path(path: Path, output_dir: Path | None) -> Path:
    if output_dir is None:
        return path
    if path.is_absolute():
        try:
            path = path.relative_to(Path.cwd())
        except ValueError:
            path = Path(path.name)
    return output_dir / path


def _print_report(console: Console, report: RenderReport, dry_run: bool) -> None:
    if report.citations:
        table = Table(title="Reference lists")
        table.add_column("Document", style="cyan")
        table.add_column("Citations", justify="right")
        table.add_column("Placeholder")
        for path, keys in report.citations.items():
            found = path not in report.missing_placeholders
            table.add_row(
                path,
                str(len(keys)),
                "[green]inserted[/green]" if found else "[yellow]missing[/yellow]",
            )
        console.print(table)

    for path, keys in report.missing_keys.items():
        console.print(
            f"[yellow]Unknown keys in {path}:[/yellow] {', '.join(sorted(set(keys)))}"
        )

    action = "Would render" if dry_run else "Rendered"
    console.print(f"[green]✓[/green] {action} {report.total_citations} citations")
