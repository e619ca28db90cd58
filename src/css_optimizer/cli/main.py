"""css-optimizer CLI: click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from css_optimizer import __version__
from css_optimizer.config import OptimizerConfig, ServiceConfig
from css_optimizer.optimizer import optimize


@click.group()
@click.version_option(version=__version__, prog_name="css-optimizer")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """CSS Optimizer - shrink stylesheets for inlining."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command("optimize")
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the optimized CSS (defaults to stdout)",
)
@click.option("--base-url", default=None, help="Location relative url() references resolve against")
@click.option(
    "--preserve-at-rules/--no-preserve-at-rules",
    default=True,
    help="Keep @media and other at-rule blocks",
)
def optimize_cmd(input_file, output: Path | None, base_url: str | None, preserve_at_rules: bool) -> None:
    """Optimize one stylesheet (use - for stdin)."""
    source = input_file.read()
    config = OptimizerConfig(preserve_at_rules=preserve_at_rules, base_location=base_url)
    result = optimize(source, config)

    if output is None:
        click.echo(result)
    else:
        output.write_text(result, encoding="utf-8")
        click.echo(f"{len(source)} -> {len(result)} bytes written to {output}", err=True)


@cli.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.option("--db", default=ServiceConfig.db_path, help="Settings database path")
@click.option("--site-url", default=ServiceConfig.site_url, help="Base URL for root-relative sources")
@click.option("--root", "document_root", default=ServiceConfig.document_root, help="Document root for local files")
@click.option("--search-dir", "search_dirs", multiple=True, help="Extra directory to look for stylesheets in")
@click.option("--timeout", default=ServiceConfig.fetch_timeout, type=float, help="HTTP timeout in seconds")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write <handle>-optimized.css files here",
)
def process(
    manifest: str,
    db: str,
    site_url: str,
    document_root: str,
    search_dirs: tuple[str, ...],
    timeout: float,
    output_dir: Path | None,
) -> None:
    """Optimize every stylesheet listed in a registrations MANIFEST."""
    from css_optimizer.errors import ManifestError
    from css_optimizer.host import SourceResolver, StyleProcessor, load_manifest
    from css_optimizer.store import Database, SettingsRepository, run_migrations

    try:
        registrations = load_manifest(manifest)
    except ManifestError as exc:
        raise click.ClickException(str(exc)) from exc

    config = ServiceConfig(
        db_path=db,
        site_url=site_url,
        document_root=document_root,
        search_dirs=search_dirs,
        fetch_timeout=timeout,
    )
    with Database(config.db_path) as database:
        run_migrations(database)
        settings = SettingsRepository(database).load()

    resolver = SourceResolver(config.document_root, config.search_dirs, timeout=config.fetch_timeout)
    try:
        styles = StyleProcessor(settings, resolver, site_url=config.site_url).process(registrations)
    finally:
        resolver.close()

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        for style in styles:
            (output_dir / f"{style.handle}.css").write_text(style.css, encoding="utf-8")

    summary = [
        {
            "handle": style.handle,
            "source": style.source,
            "original_size": style.original_size,
            "optimized_size": len(style.css),
        }
        for style in styles
    ]
    click.echo(json.dumps(summary, indent=2))


@cli.group()
def settings() -> None:
    """Show or change the persisted optimizer settings."""


@settings.command("show")
@click.option("--db", default=ServiceConfig.db_path, help="Settings database path")
def settings_show(db: str) -> None:
    """Print the current settings as JSON."""
    from css_optimizer.store import Database, SettingsRepository, run_migrations

    with Database(db) as database:
        run_migrations(database)
        current = SettingsRepository(database).load()
    click.echo(json.dumps(current.to_dict(), indent=2))


@settings.command("set")
@click.option("--db", default=ServiceConfig.db_path, help="Settings database path")
@click.option("--enabled/--disabled", default=None, help="Turn optimization on or off")
@click.option("--preserve-media-queries/--no-preserve-media-queries", default=None)
@click.option("--exclude-font-awesome/--no-exclude-font-awesome", default=None)
@click.option("--exclude-url", "excluded_urls", multiple=True, help="Wildcard URL pattern (replaces the list)")
@click.option("--exclude-class", "excluded_classes", multiple=True, help="Stylesheet class (replaces the list)")
@click.option("--clear-excluded-urls", is_flag=True, help="Empty the excluded URL list")
@click.option("--clear-excluded-classes", is_flag=True, help="Empty the excluded class list")
def settings_set(
    db: str,
    enabled: bool | None,
    preserve_media_queries: bool | None,
    exclude_font_awesome: bool | None,
    excluded_urls: tuple[str, ...],
    excluded_classes: tuple[str, ...],
    clear_excluded_urls: bool,
    clear_excluded_classes: bool,
) -> None:
    """Change the options given on the command line, keep the rest."""
    from dataclasses import replace

    from css_optimizer.store import Database, SettingsRepository, run_migrations

    changes: dict[str, object] = {}
    if enabled is not None:
        changes["enabled"] = enabled
    if preserve_media_queries is not None:
        changes["preserve_media_queries"] = preserve_media_queries
    if exclude_font_awesome is not None:
        changes["exclude_font_awesome"] = exclude_font_awesome
    if clear_excluded_urls or excluded_urls:
        changes["excluded_urls"] = excluded_urls
    if clear_excluded_classes or excluded_classes:
        changes["excluded_classes"] = excluded_classes

    with Database(db) as database:
        run_migrations(database)
        repo = SettingsRepository(database)
        updated = replace(repo.load(), **changes)
        repo.save(updated)
    click.echo(json.dumps(updated.to_dict(), indent=2))


@cli.command()
@click.option("--host", default=ServiceConfig.host, help="Host to bind to")
@click.option("--port", default=ServiceConfig.port, type=int, help="Port to bind to")
@click.option("--db", default=ServiceConfig.db_path, help="Settings database path")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, db: str, debug: bool) -> None:
    """Start the settings web server."""
    from css_optimizer.store import Database, run_migrations
    from css_optimizer.web.app import create_app

    config = ServiceConfig(db_path=db, host=host, port=port)
    database = Database(config.db_path)
    database.connect()
    run_migrations(database)

    app = create_app(db=database)
    click.echo(f"Starting CSS Optimizer on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
