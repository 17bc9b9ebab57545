from .front_matter import parse_front_matter, render_document
from .local_article_tree import LocalArticleTree

__all__ = ["parse_front_matter", "render_document", "LocalArticleTree"]
