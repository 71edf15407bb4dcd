"""
Sidebar navigation config.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class SidebarLink:
    href: str
    title: str
    icon: str


@dataclass
class LinkGroup:
    title: str
    links: List[SidebarLink] = field(default_factory=list)


DEFAULT_LINKS: List[SidebarLink] = [
    SidebarLink(href="/", title="Home", icon="home"),
    SidebarLink(href="/account", title="Account", icon="cog"),
    SidebarLink(href="/settings", title="Settings", icon="cog"),
]

ADDITIONAL_LINKS: List[LinkGroup] = [
    LinkGroup(
        title="Entities",
        links=[
            SidebarLink(href="/reviews", title="Reviews", icon="globe"),
            SidebarLink(href="/books", title="Books", icon="globe"),
            SidebarLink(href="/authors", title="Authors", icon="globe"),
        ],
    ),
]


def back_path(pathname: str, current_resource: str) -> str:
    """
    Where a detail page's back button leads.

    A nested page goes up to the parent record ("/authors/A1/books/B1" ->
    "/authors/A1"); a top-level detail page goes to its list ("/books/B1" ->
    "/books").
    """
    segments = [s for s in pathname.strip("/").split("/") if s]
    if not segments:
        return "/"
    if len(segments) > 2:
        positions = [i for i, s in enumerate(segments[:-1]) if s == current_resource]
        if positions:
            return "/" + "/".join(segments[: positions[-1]]) if positions[-1] > 0 else "/"
    return "/" + segments[0]
