import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from app import config
from domain.city_api import (
    CityApi,
    CityNotFound,
    WeatherUnavailable,
    city_api_client,
)
from domain.repository import RecipeNotFound, RecipeRepository
from domain.services import (
    ValidationError,
    city_infos,
    create_recipe,
    delete_recipe,
)


logger = logging.getLogger(__name__)



def aJSONResponse(route: Callable[..., Awaitable[Any | tuple[Any, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> Response:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            body, code = resp, 200
        else:
            body, code = resp
        if body is None:
            return Response(status_code=code)
        return JSONResponse(body, status_code=code)

    return wrapper


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "healthy", "service": "city-infos"})


@aJSONResponse
async def infos(request: Request) -> dict[str, Any]:
    got = await city_infos(
        request.path_params["city_id"],
        city_api=request.app.state.city_api,
        repository=request.app.state.repository,
    )
    return got.to_dict()


@aJSONResponse
async def recipes(request: Request) -> tuple[dict[str, Any], int]:
    # A missing, unparsable or non-object body is a missing `content`. The
    # city is checked first either way.
    try:
        body = await request.json()
    except ValueError:
        body = None
    content = body.get("content") if isinstance(body, dict) else None

    recipe = await create_recipe(
        request.path_params["city_id"],
        content,
        city_api=request.app.state.city_api,
        repository=request.app.state.repository,
    )
    return recipe.to_dict(), 201


@aJSONResponse
async def recipe(request: Request) -> tuple[None, int]:
    await delete_recipe(
        request.path_params["city_id"],
        request.path_params["recipe_id"],
        city_api=request.app.state.city_api,
        repository=request.app.state.repository,
    )
    return None, 204


def error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "%s %s -> %s: %s", request.method, request.url.path, status_code, exc
        )
        return JSONResponse({"error": str(exc)}, status_code=status_code)

    return handler


def create_app(
    cfg: config.Config | None = None,
    *,
    city_api: CityApi | None = None,
    repository: RecipeRepository | None = None,
) -> Starlette:
    """Wire the routes to one `CityApi` and one `RecipeRepository`.

    Either collaborator may be passed in; whatever is missing is built once
    when the app starts and the `CityApi` built here is closed on shutdown.
    """
    cfg = config.Config() if cfg is None else cfg

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        owned: CityApi | None = None
        if app.state.city_api is None:
            owned = CityApi(
                city_api_client(cfg.api_base_url, cfg.api_key, timeout=cfg.timeout)
            )
            app.state.city_api = owned
        if app.state.repository is None:
            app.state.repository = RecipeRepository()
        yield
        if owned is not None:
            await owned.aclose()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/health", health),
            Route("/cities/{city_id}/infos", infos, methods=["GET"]),
            Route("/cities/{city_id}/recipes", recipes, methods=["POST"]),
            Route(
                "/cities/{city_id}/recipes/{recipe_id}", recipe, methods=["DELETE"]
            ),
        ],
        exception_handlers={
            ValidationError: error_handler(400),
            CityNotFound: error_handler(404),
            # Upstream exists but the forecast call failed. Kept at 404.
            WeatherUnavailable: error_handler(404),
            RecipeNotFound: error_handler(404),
        },
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.city_api = city_api
    app.state.repository = repository
    return app
