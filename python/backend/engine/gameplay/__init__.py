from backend.engine.gameplay.session import RouteSession

__all__ = ["RouteSession"]
