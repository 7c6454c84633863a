"""
FastAPI service exposing road management and fastest-route queries.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .container import Container
from .domain.errors import (
    InvalidRoadError,
    NodeNotFoundError,
    NoRouteFoundError,
    RouteSearchLimitError,
)
from .domain.models import Road, RoadRequest, RouteResult
from .services import PathfindingService, RoadService

logger = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoadBody(_CamelModel):
    from_city: str = Field(min_length=1)
    to_city: str = Field(min_length=1)
    travel_time_minutes: int = Field(ge=0)


class RoadOut(_CamelModel):
    from_city: str
    to_city: str
    travel_time_minutes: int

    @classmethod
    def from_road(cls, road: Road) -> RoadOut:
        return cls(
            from_city=road.from_city,
            to_city=road.to_city,
            travel_time_minutes=road.travel_time_minutes,
        )


class RouteBody(_CamelModel):
    source_city: str = Field(min_length=1)
    destination_city: str = Field(min_length=1)


class RouteOut(_CamelModel):
    path_cities: List[str]
    path_roads: List[RoadOut]
    total_travel_time_minutes: int

    @classmethod
    def from_result(cls, result: RouteResult) -> RouteOut:
        return cls(
            path_cities=list(result.path),
            path_roads=[RoadOut.from_road(road) for road in result.roads],
            total_travel_time_minutes=result.total_travel_time_minutes,
        )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the HTTP application on top of ``container``."""
    container = container or Container.create_default()
    app = FastAPI(title="Fastest Delivery Path", version="0.1.0")

    def _error(status_code: int, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_invalid(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400, content={"detail": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(NodeNotFoundError)
    async def node_not_found(request: Request, exc: NodeNotFoundError):
        return _error(404, exc)

    @app.exception_handler(NoRouteFoundError)
    async def no_route_found(request: Request, exc: NoRouteFoundError):
        return _error(404, exc)

    @app.exception_handler(InvalidRoadError)
    async def invalid_road(request: Request, exc: InvalidRoadError):
        return _error(400, exc)

    @app.exception_handler(RouteSearchLimitError)
    async def search_limit(request: Request, exc: RouteSearchLimitError):
        return _error(422, exc)

    @app.post("/roads", status_code=201, response_model=List[RoadOut], response_model_by_alias=True)
    def create_or_update_roads(payload: Union[List[RoadBody], RoadBody]):
        bodies = payload if isinstance(payload, list) else [payload]
        logger.info("Received road upsert", extra={"count": len(bodies)})

        service: RoadService = container.resolve(RoadService)
        roads = service.create_or_update_roads(
            [
                RoadRequest(
                    from_city=body.from_city,
                    to_city=body.to_city,
                    travel_time_minutes=body.travel_time_minutes,
                )
                for body in bodies
            ]
        )
        return [RoadOut.from_road(road) for road in roads]

    @app.post("/routes/fastest", response_model=RouteOut, response_model_by_alias=True)
    def find_fastest_route(payload: RouteBody):
        service: PathfindingService = container.resolve(PathfindingService)
        result = service.find_fastest_path(payload.source_city, payload.destination_city)
        return RouteOut.from_result(result)

    return app
