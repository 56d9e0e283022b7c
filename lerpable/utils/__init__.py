from .bounds import bound_position

__all__ = ["bound_position"]
