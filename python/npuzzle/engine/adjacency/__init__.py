from npuzzle.engine.adjacency.resolver import adjacent_indexes

__all__ = ["adjacent_indexes"]
