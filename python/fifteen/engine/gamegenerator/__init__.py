from fifteen.engine.gamegenerator.generator import DEFAULT_DEPTH, DEFAULT_SIZE, GameGenerator

__all__ = ["DEFAULT_DEPTH", "DEFAULT_SIZE", "GameGenerator"]
