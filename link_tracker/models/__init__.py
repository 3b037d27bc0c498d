from .bookmark import Bookmark, Tag

__all__ = ['Bookmark', 'Tag']
