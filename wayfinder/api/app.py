"""Flask HTTP API serving rooms, the navigation graph, search and routes."""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional, Tuple

from flask import Flask, Response, g, jsonify, request

from ..container import Container
from ..domain.errors import (
    GraphLoadError,
    InvalidInputError,
    NoPathFoundError,
    RenderingError,
    RoomNotFoundError,
    UnknownFloorError,
    UnknownNodeError,
    WayfinderError,
)
from ..monitoring import timed
from ..ports.graph import GraphRepositoryPort
from ..ports.rendering import MapRendererPort
from ..services import RoomService, RouteService

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[type, int] = {
    InvalidInputError: 400,
    UnknownNodeError: 404,
    NoPathFoundError: 404,
    RoomNotFoundError: 404,
    UnknownFloorError: 400,
    RenderingError: 500,
    GraphLoadError: 503,
}

ERROR_MESSAGES: Dict[type, str] = {
    InvalidInputError: "Missing parameters: from and to are required",
    UnknownNodeError: "One or both nodes not found",
    NoPathFoundError: "No route found between these points",
    RoomNotFoundError: "Room not found",
    RenderingError: "Floor map could not be rendered",
    GraphLoadError: "Map data is not available",
}


def _error_response(error: WayfinderError) -> Tuple[Response, int]:
    status = 500
    message = str(error)
    for error_type, code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            status = code
            message = ERROR_MESSAGES.get(error_type, message)
            break
    body = {"error": message, "kind": error.kind}
    if isinstance(error, UnknownNodeError):
        body["nodes"] = list(error.node_ids)
    return jsonify(body), status


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask application around a container.

    Args:
        container: Composition root; the default production wiring is
            used when omitted.
    """
    container = container or Container.create_default()
    config = container.config

    app = Flask(__name__)
    app.config["CONTAINER"] = container
    app.json.sort_keys = False

    route_service: RouteService = container.resolve(RouteService)
    room_service: RoomService = container.resolve(RoomService)

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish_request(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = config.server.cors_origin
        started = g.get("request_started")
        if started is not None:
            logger.info(
                "Request handled",
                extra={
                    "method": request.method,
                    "url_path": request.path,
                    "status": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
        return response

    @app.errorhandler(WayfinderError)
    def _handle_domain_error(error: WayfinderError):
        if isinstance(error, GraphLoadError):
            logger.error("Serving without map data", extra={"error": str(error)})
        return _error_response(error)

    @app.route("/health")
    def health_check():
        return {"status": "healthy", "service": config.server.service_name}

    @app.route("/api/rooms")
    def api_rooms():
        return jsonify({"rooms": [room.to_dict() for room in room_service.list_rooms()]})

    @app.route("/api/rooms/<room_id>")
    def api_room(room_id: str):
        return jsonify(room_service.get_room(room_id).to_dict())

    @app.route("/api/graph")
    def api_graph():
        graph = container.resolve(GraphRepositoryPort).load()
        return jsonify(graph.to_dict())

    @app.route("/api/search")
    def api_search():
        query = request.args.get("q", "").strip()
        if not query:
            return jsonify({"results": []})
        results = room_service.search(query)
        return jsonify(
            {
                "results": [room.to_dict() for room in results],
                "query": query,
                "count": len(results),
            }
        )

    @app.route("/api/route")
    def api_route():
        source = request.args.get("from")
        target = request.args.get("to")
        with timed("Route request", source=source, target=target):
            route = route_service.route(source, target)
        return jsonify(route.to_dict())

    @app.route("/api/route-points")
    def api_route_points():
        return jsonify(
            {
                "special": [node.to_dict() for node in room_service.special_points()],
                "rooms": [room.to_dict() for room in room_service.routable_rooms()],
            }
        )

    @app.route("/map")
    def floor_map():
        floor = request.args.get("floor", type=int)
        source = request.args.get("from")
        target = request.args.get("to")

        route = None
        if source or target:
            route = route_service.route(source, target)
        if floor is None:
            floor = route.nodes[0].floor if route is not None else config.map.floors[0]

        graph = container.resolve(GraphRepositoryPort).load()
        renderer: MapRendererPort = container.resolve(MapRendererPort)
        with timed("Floor rendered", floor=floor):
            document = renderer.render_floor(
                graph, floor, route=route, rooms=room_service.list_rooms()
            )
        return Response(document, mimetype="text/html")

    return app
