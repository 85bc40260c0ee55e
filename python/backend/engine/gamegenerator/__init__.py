from backend.engine.gamegenerator.generator import DEFAULT_SIZE, GameGenerator

__all__ = ["DEFAULT_SIZE", "GameGenerator"]
