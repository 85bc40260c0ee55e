from backend.models.board import Board, Direction, Wall
from backend.models.route import InvalidRouteError, Move, encode_route, parse_route, route_payload
from backend.models.snapshot import GameSnapshot

__all__ = [
    "Board",
    "Direction",
    "GameSnapshot",
    "InvalidRouteError",
    "Move",
    "Wall",
    "encode_route",
    "parse_route",
    "route_payload",
]
