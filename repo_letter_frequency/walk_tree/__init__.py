from .walk_tree import walk_tree

__all__ = ["walk_tree"]
