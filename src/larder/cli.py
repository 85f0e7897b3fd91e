"""Command-line interface for Larder."""

from __future__ import annotations

import json
from typing import Any, List, Optional

import typer
from pydantic import ValidationError

from larder.config import get_settings
from larder.ingest import HydrationError
from larder.logging_utils import configure_logging
from larder.models.store import PlanSnapshot
from larder.planner import service
from larder.planner.browse import SORT_ALPHABETICAL

app = typer.Typer(help="Larder meal-plan shopping list and synergy commands.")


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


def _load_snapshot(snapshot_path: str) -> PlanSnapshot:
    with open(snapshot_path, "r", encoding="utf-8") as fh:
        payload = json.load(fh)
    try:
        return PlanSnapshot.model_validate(payload)
    except ValidationError as exc:
        typer.secho(f"Invalid plan snapshot: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _echo_json(payload: Any, pretty: bool) -> None:
    typer.echo(json.dumps(payload, indent=2 if pretty else None, sort_keys=pretty))


def _hydration_exit(exc: HydrationError) -> typer.Exit:
    typer.secho(f"Unable to hydrate recipes: {exc}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@app.command("shopping-list")
def shopping_list(
    snapshot_path: str,
    text: bool = typer.Option(False, "--text", help="Print the plain-text export instead of JSON."),
    supermarket: Optional[str] = typer.Option(
        None,
        "--supermarket",
        help="Add search links for this supermarket to the text export.",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Build the consolidated shopping list for the plan in a snapshot JSON file.
    """
    snapshot = _load_snapshot(snapshot_path)
    try:
        if text:
            typer.echo(service.shopping_list_text(snapshot, supermarket=supermarket))
            return
        result = service.build_shopping_list(snapshot)
    except HydrationError as exc:
        raise _hydration_exit(exc) from exc
    _echo_json(result.model_dump(mode="json"), pretty)


@app.command()
def synergy(
    snapshot_path: str,
    sort: Optional[str] = typer.Option(None, "--sort", help="Order by 'title' or 'matches'."),
    text: bool = typer.Option(False, "--text", help="Print recipe cards instead of JSON."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """
    List catalog recipes that reuse the plan's core ingredients.
    """
    snapshot = _load_snapshot(snapshot_path)
    try:
        if text:
            typer.echo(service.synergy_text(snapshot, sort_by=sort))
            return
        recommendations = service.recommend_recipes(snapshot, sort_by=sort)
    except HydrationError as exc:
        raise _hydration_exit(exc) from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--sort") from exc
    _echo_json([rec.model_dump(mode="json") for rec in recommendations], pretty)


@app.command()
def addable(
    snapshot_path: str,
    ingredient: List[str] = typer.Option(
        [],
        "--ingredient",
        help="Only keep recipes using this ingredient (repeatable).",
    ),
    servings: Optional[int] = typer.Option(None, "--servings", help="Exact servings count."),
    sort_by: str = typer.Option(
        SORT_ALPHABETICAL,
        "--sort-by",
        help="alphabetical, cook-time or heat-level.",
    ),
    desc: bool = typer.Option(False, "--desc", help="Reverse the ordering."),
    list_ingredients: bool = typer.Option(
        False,
        "--list-ingredients",
        help="Print the ingredient names available as filters instead of recipes.",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """List recipes that are not yet planned, filtered and sorted."""

    snapshot = _load_snapshot(snapshot_path)
    try:
        if list_ingredients:
            _echo_json(service.addable_ingredient_options(snapshot), pretty)
            return
        recipes = service.addable_recipes(
            snapshot,
            ingredient_names=ingredient,
            servings=servings,
            sort_by=sort_by,
            direction="desc" if desc else "asc",
        )
    except HydrationError as exc:
        raise _hydration_exit(exc) from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--sort-by") from exc
    _echo_json([recipe.model_dump(mode="json") for recipe in recipes], pretty)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", envvar="LARDER_SERVER_HOST"),
    port: int = typer.Option(8000, "--port", envvar="LARDER_SERVER_PORT"),
    reload: bool = typer.Option(False, "--reload", help="Restart on source changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    from larder.server.run import serve as run_server

    run_server(host=host, port=port, reload=reload)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m larder`."""
    app(prog_name="larder", args=argv)


if __name__ == "__main__":
    main()
