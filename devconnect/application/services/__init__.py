from .post_view_builder import PostViewBuilder

__all__ = ["PostViewBuilder"]
