from fifteen.engine.frontier.minpq import MinPQ

__all__ = ["MinPQ"]
