"""Command line interface for sketch-py.

Renders sketches defined in Python modules, either to a file or as a live
view in the browser.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any, NoReturn

import rich_click as click
from rich.console import Console
from rich.table import Table

from sketch_py import __version__
from sketch_py.config import BACKENDS, SketchConfig
from sketch_py.core.logging import configure_logging
from sketch_py.core.sketch import Sketch
from sketch_py.examples import example
from sketch_py.exceptions import BackendIOError, SketchError
from sketch_py.live import LiveBackend, describe_items
from sketch_py.render import MagickBackend, PillowBackend, SvgBackend, render
from sketch_py.render.base import output_filename

console = Console()


def load_sketch(target: str) -> Sketch:
    """Load a sketch from a ``module:attribute`` reference.

    The attribute may be a sketch or a callable taking no arguments that
    returns one.

    Raises:
        click.BadParameter: If the reference cannot be resolved to a sketch.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        msg = "expected MODULE:ATTRIBUTE, for example 'drawings:poster'"
        raise click.BadParameter(msg, param_hint="TARGET")
    if str(Path.cwd()) not in sys.path:
        sys.path.insert(0, str(Path.cwd()))
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"cannot import module {module_name!r}: {exc}"
        raise click.BadParameter(msg, param_hint="TARGET") from exc
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"{module_name!r} has no attribute {attribute!r}"
            raise click.BadParameter(msg, param_hint="TARGET") from exc
    if callable(obj) and not isinstance(obj, Sketch):
        obj = obj()
    if not isinstance(obj, Sketch):
        msg = f"{target} is a {type(obj).__name__}, not a Sketch"
        raise click.BadParameter(msg, param_hint="TARGET")
    return obj


def write_sketch(sketch: Sketch, backend_name: str, output: Path) -> None:
    """Render ``sketch`` with a static backend and report where it went."""
    if backend_name == "svg":
        path = output / output_filename(sketch.title, ".svg")
        markup = render(sketch, SvgBackend())
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(markup, encoding="utf-8")
        except OSError as exc:
            msg = f"Failed to write {path}: {exc}"
            raise BackendIOError(msg) from exc
    elif backend_name == "magick":
        path = render(sketch, MagickBackend(output))
    else:
        path = render(sketch, PillowBackend(output))
    console.print(f"[green]Wrote[/green] {path}")


def _fail(exc: SketchError) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    raise SystemExit(1)


@click.group(name="sketch", help="Build and render declarative 2-D sketches.")
@click.version_option(version=__version__, prog_name="sketch")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_json: bool) -> None:
    """Build and render declarative 2-D sketches."""
    try:
        config = SketchConfig.from_env()
    except SketchError as exc:
        _fail(exc)
    config.debug = config.debug or verbose
    config.json_logs = config.json_logs or log_json
    configure_logging(debug=config.debug, json_logs=config.json_logs)
    ctx.obj = config


@cli.command(name="render", help="Render TARGET (MODULE:ATTRIBUTE) to a file.")
@click.argument("target")
@click.option("--backend", "-b", type=click.Choice(BACKENDS), default=None, help="Output backend")
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), default=None, help="Output directory")
@click.pass_obj
def render_command(config: SketchConfig, target: str, backend: str | None, output: Path | None) -> None:
    """Render TARGET (MODULE:ATTRIBUTE) to a file."""
    try:
        sketch = load_sketch(target)
        write_sketch(sketch, backend or config.backend, output or config.output_dir)
    except SketchError as exc:
        _fail(exc)


@cli.command(name="example", help="Render the built-in example sketch.")
@click.option("--backend", "-b", type=click.Choice(BACKENDS), default=None, help="Output backend")
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), default=None, help="Output directory")
@click.pass_obj
def example_command(config: SketchConfig, backend: str | None, output: Path | None) -> None:
    """Render the built-in example sketch."""
    try:
        write_sketch(example(), backend or config.backend, output or config.output_dir)
    except SketchError as exc:
        _fail(exc)


@cli.command(name="describe", help="List the items of TARGET in replay order.")
@click.argument("target")
@click.pass_obj
def describe_command(config: SketchConfig, target: str) -> None:
    """List the items of TARGET in replay order."""
    try:
        sketch = load_sketch(target)
    except SketchError as exc:
        _fail(exc)

    table = Table(title=f"{sketch.title} ({sketch.width}x{sketch.height}, {sketch.background.to_hex()})")
    table.add_column("Step", style="dim", justify="right")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Kind", style="green")
    table.add_column("Details", style="yellow")

    for step, entry in enumerate(describe_items(sketch), start=1):
        item = sketch.items[entry["id"]]
        table.add_row(str(step), str(entry["id"]), entry["kind"], repr(item))

    console.print(table)


@cli.command(name="serve", help="Show TARGET in the browser as a live view.")
@click.argument("target")
@click.option("--host", default=None, help="Interface to bind")
@click.option("--port", "-p", type=int, default=None, help="Port to listen on")
@click.pass_obj
def serve_command(config: SketchConfig, target: str, host: str | None, port: int | None) -> None:
    """Show TARGET in the browser as a live view."""
    config.host = host or config.host
    config.port = port or config.port
    try:
        sketch = load_sketch(target)
        view = render(sketch, LiveBackend(config))
    except SketchError as exc:
        _fail(exc)
    console.print(f"[green]Serving[/green] {sketch.title} at http://{config.host}:{config.port}/")
    view.serve()


def main() -> None:
    """Entry point for the ``sketch`` console script."""
    cli()
