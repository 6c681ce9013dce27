from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Sequence

import typer
from typing_extensions import Annotated

from .container import Container
from ..config.settings import AppConfig
from ..core.package_info import PackageInfo


app = typer.Typer(add_completion=False, help="Package identity normalization for vulnerability matching")


class LogLevel(str, Enum):
    OFF = "OFF"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


def configure_logging(level_name: str | None) -> None:
    """Attach a stderr handler to the package logger at the given level."""
    if level_name is None or level_name.upper() == LogLevel.OFF.value:
        return

    level = logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)

    package_name = __package__.split(".", 1)[0] if __package__ else "pkg_identity"
    logger = logging.getLogger(package_name)

    has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()  # stderr
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    # keep records out of the root logger so nothing is printed twice
    logger.propagate = False
    logger.setLevel(level)


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option(
            "--log-level",
            help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG). Default: PKG_IDENTITY_LOG_LEVEL or OFF",
        ),
    ] = None,
) -> None:
    """Root command callback to configure logging if requested."""
    configure_logging(log_level.value if log_level is not None else AppConfig().log_level)


@contextmanager
def provide_container(inventory: Path) -> Iterator[Container]:
    container = Container()
    container.config.from_dict({"inventory_path": inventory})
    container.init_resources()
    try:
        yield container
    finally:
        container.shutdown_resources()


@app.command("resolve", help="Print the normalized name, version, ecosystem and source type of every package in INVENTORY.")
def resolve_cmd(
    inventory: Path = typer.Argument(..., help="JSON inventory written by the extractors"),
    filter: str | None = typer.Option(None, "--filter", "-f", help="Filter expression (e.g., 'source_type == \"os\"', '\"dev\" in dep_groups')"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array instead of a table"),
) -> None:
    with provide_container(inventory) as container:
        uc = container.resolve_uc()
        try:
            packages = uc.execute(filter_expr=filter)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        if as_json:
            typer.echo(json.dumps([_to_dict(p) for p in packages], ensure_ascii=False, indent=2))
        else:
            _print_table(packages)


@app.command("sources", help="Count the packages in INVENTORY per source type.")
def sources_cmd(
    inventory: Path = typer.Argument(..., help="JSON inventory written by the extractors"),
) -> None:
    with provide_container(inventory) as container:
        uc = container.summarize_uc()
        try:
            summary = uc.execute()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        for source_type, count in summary.items():
            typer.echo(f"{source_type.value:10} {count:>6}")


def _to_dict(p: PackageInfo) -> dict:
    return {
        "name": p.name(),
        "version": p.version(),
        "ecosystem": str(p.ecosystem()),
        "source_type": p.source_type().value,
        "location": p.location(),
        "commit": p.commit(),
        "dep_groups": p.dep_groups(),
        "os_package_name": p.os_package_name(),
    }


def _print_table(packages: Sequence[PackageInfo]) -> None:
    typer.echo(f"{'Name':40} {'Version':20} {'Ecosystem':16} {'Source':9} Location")
    for p in packages:
        eco = str(p.ecosystem()) or "-"
        typer.echo(f"{p.name():40} {p.version() or '-':20} {eco:16} {p.source_type().value:9} {p.location() or '-'}")


if __name__ == "__main__":  # pragma: no cover
    app()
