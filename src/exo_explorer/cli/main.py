"""`exo-explorer` command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from exo_explorer.catalogs.store import CatalogStore, SearchFilters
from exo_explorer.cli.common_cli import (
    EXIT_DATA_UNAVAILABLE,
    EXIT_INPUT_ERROR,
    ExoCliError,
    configure_logging,
    dump_json_output,
    resolve_optional_output_path,
)
from exo_explorer.config import PipelineConfig
from exo_explorer.domain.planet import PlanetRecord
from exo_explorer.domain.progress import ProgressEvent
from exo_explorer.pipeline.bootstrap import BootstrapResult, initialize_catalog
from exo_explorer.pipeline.loader import CatalogPipeline
from exo_explorer.platform.io.cache import CatalogCache


def _load_store(
    config: PipelineConfig, *, offline: bool, echo_progress: bool = False
) -> tuple[CatalogStore, BootstrapResult, list[ProgressEvent]]:
    events: list[ProgressEvent] = []

    def on_progress(event: ProgressEvent) -> None:
        events.append(event)
        if echo_progress:
            click.echo(f"[{event.phase.value}] {event.message}", err=True)

    pipeline = CatalogPipeline.from_config(config)
    store = CatalogStore(cache=pipeline.cache)
    result = initialize_catalog(
        store, pipeline, on_progress=on_progress, offline=offline, schedule_refresh=False
    )
    return store, result, events


def _summary(p: PlanetRecord) -> dict[str, Any]:
    return {
        "name": p.name,
        "system": p.system,
        "type": p.type,
        "distance": p.distance,
        "radius": p.radius,
        "eqTemp": p.eq_temp,
        "habitability": p.habitability,
        "esi": p.esi.global_ if p.esi is not None else None,
        "hzStatus": p.hz_status.label if p.hz_status is not None else None,
        "discovered": p.discovered,
    }


@click.group()
@click.version_option(package_name="exo-explorer")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Cache directory (default: EXO_EXPLORER_CACHE_DIR or the user cache dir).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, cache_dir: Path | None, verbose: bool) -> None:
    """Browse confirmed exoplanets from the NASA Exoplanet Archive."""
    configure_logging(verbose)
    try:
        config = PipelineConfig.from_env()
    except ValueError as exc:
        raise ExoCliError(str(exc), exit_code=EXIT_INPUT_ERROR) from exc
    if cache_dir is not None:
        config = config.with_overrides(cache_dir=cache_dir)
    ctx.obj = config


@cli.command()
@click.option("--offline", is_flag=True, default=False, help="Skip the network; cache or built-in only.")
@click.option("--progress", is_flag=True, default=False, help="Echo load phases to stderr.")
@click.option(
    "--json-out",
    "json_out_arg",
    type=str,
    default=None,
    help="Write the summary here instead of stdout. Use '-' for stdout.",
)
@click.pass_obj
def load(config: PipelineConfig, offline: bool, progress: bool, json_out_arg: str | None) -> None:
    """Run the catalog pipeline and refresh the local cache."""
    store, result, events = _load_store(config, offline=offline, echo_progress=progress)
    payload = result.load.to_dict()
    payload.update(
        {
            "source": result.source,
            "count": len(store),
            "phases": [e.phase.value for e in events],
        }
    )
    dump_json_output(payload, resolve_optional_output_path(json_out_arg))


@cli.command()
@click.argument("query", required=False, default="")
@click.option("--type", "planet_type", type=str, default=None, help='Exact type, e.g. "Super-Earth".')
@click.option("--min-habitability", type=float, default=None)
@click.option("--max-distance", type=float, default=None, help="Light-years.")
@click.option("--star-type", type=str, default=None, help="Spectral type prefix, e.g. G or M5.")
@click.option("--method", "discovery_method", type=str, default=None)
@click.option("--in-hz", type=click.Choice(["conservative", "optimistic"]), default=None)
@click.option("--min-esi", type=float, default=None)
@click.option("--sort-by", type=str, default="name", show_default=True)
@click.option("--sort-dir", type=click.Choice(["asc", "desc"]), default="asc", show_default=True)
@click.option("--limit", type=int, default=20, show_default=True)
@click.option("--full", is_flag=True, default=False, help="Emit complete records.")
@click.pass_obj
def search(
    config: PipelineConfig,
    query: str,
    planet_type: str | None,
    min_habitability: float | None,
    max_distance: float | None,
    star_type: str | None,
    discovery_method: str | None,
    in_hz: str | None,
    min_esi: float | None,
    sort_by: str,
    sort_dir: str,
    limit: int,
    full: bool,
) -> None:
    """Search the cached (or built-in) catalog."""
    if limit < 0:
        raise ExoCliError("--limit must be >= 0")
    try:
        filters = SearchFilters(
            type=planet_type,
            min_habitability=min_habitability,
            max_distance=max_distance,
            star_type=star_type,
            discovery_method=discovery_method,
            in_hz=in_hz,
            min_esi=min_esi,
            sort_by=sort_by,
            sort_dir=sort_dir,
        )
    except ValueError as exc:
        raise ExoCliError(str(exc)) from exc

    store, _, _ = _load_store(config, offline=True)
    matches = store.search(query, filters)
    shown = matches[:limit]
    dump_json_output(
        {
            "query": query,
            "source": store.source,
            "total": len(matches),
            "results": [p.to_dict() if full else _summary(p) for p in shown],
        },
        None,
    )


@cli.command()
@click.argument("name")
@click.pass_obj
def planet(config: PipelineConfig, name: str) -> None:
    """Show one enriched planet by exact name."""
    store, _, _ = _load_store(config, offline=True)
    record = store.get_by_name(name)
    if record is None:
        raise ExoCliError(f"Planet not found: {name}", exit_code=EXIT_DATA_UNAVAILABLE)
    payload = record.to_dict()
    payload["systemPlanets"] = [p.name for p in store.get_system_planets(record.system)]
    dump_json_output(payload, None)


@cli.command()
@click.pass_obj
def stats(config: PipelineConfig) -> None:
    """Aggregate statistics for the cached (or built-in) catalog."""
    store, _, _ = _load_store(config, offline=True)
    dump_json_output(store.get_stats().to_dict(), None)


@cli.command(name="cache-info")
@click.pass_obj
def cache_info(config: PipelineConfig) -> None:
    """Show when the local cache was last updated."""
    cache = CatalogCache.from_config(config)
    meta = cache.read_meta()
    if meta is None:
        dump_json_output({"cached": False, "cache_dir": str(config.resolved_cache_dir())}, None)
        return
    payload: dict[str, Any] = {
        "cached": True,
        "cache_dir": str(config.resolved_cache_dir()),
        "version": meta.version,
        "fresh": cache.is_fresh(),
        "usable": cache.is_usable(),
        "truncated": meta.truncated,
        "cached_count": meta.cached_count,
    }
    payload.update(cache.last_updated() or {})
    dump_json_output(payload, None)


@cli.command(name="cache-clear")
@click.pass_obj
def cache_clear(config: PipelineConfig) -> None:
    """Remove the cached catalog and its metadata."""
    CatalogCache.from_config(config).clear()
    dump_json_output({"cleared": True, "cache_dir": str(config.resolved_cache_dir())}, None)


if __name__ == "__main__":
    cli()
