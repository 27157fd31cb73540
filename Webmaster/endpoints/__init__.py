from .hosts import HostsAPI
from .important_urls import ImportantUrlsAPI
from .indexing import IndexingAPI
from .links import LinksAPI
from .original_texts import OriginalTextsAPI
from .queries import QueriesAPI
from .recrawl import RecrawlAPI
from .sitemaps import SitemapsAPI

__all__ = [
    "HostsAPI",
    "ImportantUrlsAPI",
    "IndexingAPI",
    "LinksAPI",
    "OriginalTextsAPI",
    "QueriesAPI",
    "RecrawlAPI",
    "SitemapsAPI",
]
