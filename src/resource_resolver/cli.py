# src/resource_resolver/cli.py
import logging
from typing import List, Optional

import typer

from .base import Resolver
from .config import ResolverConfig, build_resolver, load_config
from .scheme import split as split_resource
from .util.logging import setup as setup_logging

app = typer.Typer(help="Resolve resource strings (string://, bytes://, file://, http(s)://)", no_args_is_help=True)

logger = logging.getLogger("resource-resolver.cli")


def _parse_data(pairs: List[str]) -> dict:
    data = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--data")
        data[key] = value
    return data


def _build(config: Optional[str], data: List[str]) -> Resolver:
    cfg = load_config(config) if config else ResolverConfig()
    # logs go to stderr so they never mix with resource content on stdout
    setup_logging(cfg.logging.level, cfg.logging.json_mode)
    if data:
        cfg.template.data = {**cfg.template.data, **_parse_data(data)}
    return build_resolver(cfg)


@app.command("cat")
def cat(
        resource: str = typer.Argument(..., help="Resource string to resolve."),
        config: Optional[str] = typer.Option(None, "-c", "--config", help="Path to YAML resolver configuration."),
        data: List[str] = typer.Option([], "-d", "--data", help="Template variable as key=value (repeatable)."),
):
    """
    Resolve RESOURCE and stream its contents to stdout.
    """
    resolver = _build(config, data)
    try:
        handle = resolver.resolve(resource)
        logger.debug(f"Streaming {handle.location()}")
        out = typer.get_binary_stream("stdout")
        count = handle.write_to(out)
        out.flush()
    except Exception as e:
        logger.debug("Resolution failed", exc_info=True)
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    logger.debug(f"Wrote {count} bytes")


@app.command("locate")
def locate(
        resource: str = typer.Argument(..., help="Resource string to resolve."),
        config: Optional[str] = typer.Option(None, "-c", "--config", help="Path to YAML resolver configuration."),
        data: List[str] = typer.Option([], "-d", "--data", help="Template variable as key=value (repeatable)."),
):
    """
    Resolve RESOURCE and print where its data lives, without reading it.
    """
    resolver = _build(config, data)
    try:
        handle = resolver.resolve(resource)
    except Exception as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(handle.location())


@app.command("split")
def split(resource: str = typer.Argument(..., help="Resource string to split.")):
    """
    Print the scheme and value of RESOURCE, one per line.
    """
    scheme, value = split_resource(resource)
    typer.echo(scheme)
    typer.echo(value)


def main():
    app()


if __name__ == "__main__":
    main()
