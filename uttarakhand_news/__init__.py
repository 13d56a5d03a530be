"""Content resolution for the Inside Uttarakhand News site.

Pages are assembled from a remote JSON API; when it is unreachable, static
fallback content is served instead so no page renders empty.
"""
from uttarakhand_news.pages import PageAssembler
from uttarakhand_news.resolver import EndpointResolver

__version__ = "0.1.0"

__all__ = ["EndpointResolver", "PageAssembler", "__version__"]
