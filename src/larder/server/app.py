"""ASGI application for Larder."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Literal, Optional
from uuid import uuid4

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from larder import __version__, metrics
from larder.config import Settings, get_settings
from larder.ingest import HydrationError
from larder.logging_utils import configure_logging as configure_app_logging
from larder.models.recipe import Recipe
from larder.models.shopping import ShoppingList
from larder.models.store import PlanSnapshot
from larder.models.synergy import SynergyRecommendation
from larder.server import deps

logger = logging.getLogger(__name__)

BODY_PREVIEW_LIMIT = 2048


def _json_safe(value: Any) -> Any:
    """Convert non-serializable values into JSON-safe representations."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        return [_json_safe(entry) for entry in value]
    if isinstance(value, dict):
        return {key: _json_safe(sub_value) for key, sub_value in value.items()}
    return repr(value)


def _normalize_validation_errors(errors: Any) -> list[dict[str, Any]]:
    """Ensure validation error payloads can be serialized to JSON."""

    return [{key: _json_safe(value) for key, value in error.items()} for error in errors]


def _request_log_kwargs(request: Request) -> dict[str, Any]:
    request_id = getattr(request.state, "request_id", None)
    return {"extra": {"request_id": request_id}} if request_id else {}


def _configure_logging(settings: Settings) -> None:
    configure_app_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Larder Plan Consolidation", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("larder.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details and record request metrics."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=path,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
            return response

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        body_preview: Optional[str] = None
        raw_body = await request.body()
        if raw_body:
            decoded = raw_body.decode("utf-8", errors="replace")
            if len(decoded) > BODY_PREVIEW_LIMIT:
                decoded = decoded[:BODY_PREVIEW_LIMIT] + "...(truncated)"
            body_preview = decoded

        logger.warning(
            "Validation error on %s %s: %s | body=%s",
            request.method,
            request.url.path,
            exc.errors(),
            body_preview,
            **_request_log_kwargs(request),
        )
        return JSONResponse(
            status_code=422,
            content={"detail": _normalize_validation_errors(exc.errors())},
        )

    @application.exception_handler(HydrationError)
    async def hydration_exception_handler(request: Request, exc: HydrationError):
        logger.warning(
            "Rejected unhydrated snapshot on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            **_request_log_kwargs(request),
        )
        return JSONResponse(
            status_code=422,
            content={
                "detail": [
                    {
                        "type": "hydration_error",
                        "loc": ["body", "recipes", exc.recipe_id, "recipe_ingredients", exc.position],
                        "msg": str(exc),
                    }
                ]
            },
        )

    @application.post(
        "/shopping-list",
        response_model=ShoppingList,
        summary="Consolidate planned recipes into a shopping list",
    )
    def shopping_list_endpoint(
        snapshot: PlanSnapshot,
        auth: None = Depends(deps.require_api_token),
        builder: deps.ShoppingListBuilder = Depends(deps.get_shopping_list_builder),
    ) -> ShoppingList:
        return builder(snapshot)

    @application.post(
        "/shopping-list/text",
        response_class=PlainTextResponse,
        summary="Export unchecked shopping list items as plain text",
    )
    def shopping_list_text_endpoint(
        snapshot: PlanSnapshot,
        supermarket: Optional[str] = Query(default=None, min_length=1, max_length=64),
        auth: None = Depends(deps.require_api_token),
        renderer: deps.ShoppingTextRenderer = Depends(deps.get_shopping_text_renderer),
    ) -> PlainTextResponse:
        return PlainTextResponse(renderer(snapshot, supermarket))

    @application.post(
        "/synergy",
        response_model=list[SynergyRecommendation],
        summary="Recommend recipes that reuse the plan's core ingredients",
    )
    def synergy_endpoint(
        snapshot: PlanSnapshot,
        sort: Optional[Literal["title", "matches"]] = Query(default=None),
        auth: None = Depends(deps.require_api_token),
        recommender: deps.SynergyRecommender = Depends(deps.get_synergy_recommender),
    ) -> list[SynergyRecommendation]:
        return recommender(snapshot, sort)

    @application.post(
        "/synergy/text",
        response_class=PlainTextResponse,
        summary="Export synergy recommendations as plain-text recipe cards",
    )
    def synergy_text_endpoint(
        snapshot: PlanSnapshot,
        sort: Optional[Literal["title", "matches"]] = Query(default=None),
        auth: None = Depends(deps.require_api_token),
        renderer: deps.SynergyTextRenderer = Depends(deps.get_synergy_text_renderer),
    ) -> PlainTextResponse:
        return PlainTextResponse(renderer(snapshot, sort))

    @application.post(
        "/plan/addable",
        response_model=list[Recipe],
        summary="List recipes that can still be added to the plan",
    )
    def addable_recipes_endpoint(
        snapshot: PlanSnapshot,
        ingredient: Optional[list[str]] = Query(default=None),
        servings: Optional[int] = Query(default=None, ge=0),
        sort_by: Literal["alphabetical", "cook-time", "heat-level"] = Query(default="alphabetical"),
        direction: Literal["asc", "desc"] = Query(default="asc"),
        auth: None = Depends(deps.require_api_token),
        provider: deps.AddableRecipesProvider = Depends(deps.get_addable_recipes_provider),
    ) -> list[Recipe]:
        return provider(snapshot, ingredient or [], servings, sort_by, direction)

    @application.post(
        "/plan/addable/ingredients",
        response_model=list[str],
        summary="List ingredient names usable as filters for addable recipes",
    )
    def addable_ingredients_endpoint(
        snapshot: PlanSnapshot,
        auth: None = Depends(deps.require_api_token),
        provider: deps.IngredientOptionsProvider = Depends(deps.get_ingredient_options_provider),
    ) -> list[str]:
        return provider(snapshot)

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


__all__ = ["create_app"]
