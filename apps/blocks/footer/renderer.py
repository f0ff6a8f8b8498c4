# apps/blocks/footer/renderer.py
"""
Rendu du footer copyright — fonction pure.

Aucune I/O ici : le nom du site et la date sont fournis par l'appelant
(voir apps.blocks.compose). Le nom du site est interpolé SANS échappement,
comme le bloc d'origine ; le sanitizer d'allowlist s'applique en aval.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, FrozenSet

ALLOWED_TAGS: FrozenSet[str] = frozenset({
    "div", "script", "style", "link", "form",
    "h1", "h2", "h3", "h4", "h5",
    "table", "thead", "tr", "td", "tbody", "tfoot",
    "img", "a", "span", "option", "select", "input",
    "ul", "li", "br", "p", "hr",
})

NEVER_CACHE = 0


@dataclass(frozen=True)
class SiteIdentity:
    name: str = ""

    @classmethod
    def from_config(cls, value: Any) -> "SiteIdentity":
        # La config renvoie False/None quand la clé est absente.
        if value is None or value is False:
            return cls("")
        return cls(str(value))


@dataclass(frozen=True)
class RenderedFragment:
    markup: str
    cache_max_age: int = NEVER_CACHE
    allowed_tags: FrozenSet[str] = field(default=ALLOWED_TAGS)


@dataclass(frozen=True)
class FooterTemplate:
    """
    Gabarit typé à placeholders nommés.

    `escape_site_name` reste à False : le nom est injecté tel quel (risque
    d'injection connu, à valider côté produit avant de changer).
    """
    container_open: str = '<div class="footer-copyright">'
    notice: str = "<p>© {year} {site_name}. All Rights Reserved.</p>"
    menu_open: str = '<div class="menu-footer">'
    menu_close: str = "</div>"
    escape_site_name: bool = False

    def format(self, *, year: str, site_name: str, close_menu_container: bool) -> str:
        if self.escape_site_name:
            from django.utils.html import escape
            site_name = escape(site_name)
        parts = [
            self.container_open,
            self.notice.format_map({"year": year, "site_name": site_name}),
            self.menu_open,
        ]
        if close_menu_container:
            parts.append(self.menu_close)
        return "".join(parts)


DEFAULT_TEMPLATE = FooterTemplate()


def _as_text(x: Any) -> str:
    if x is None:
        return ""
    return x if isinstance(x, str) else str(x)


def _year(now: date) -> str:
    return "%04d" % now.year


def render(
    site_name: str,
    now: date,
    *,
    close_menu_container: bool = False,
    template: FooterTemplate = DEFAULT_TEMPLATE,
) -> RenderedFragment:
    markup = template.format(
        year=_year(now),
        site_name=_as_text(site_name),
        close_menu_container=close_menu_container,
    )
    return RenderedFragment(markup=markup, cache_max_age=NEVER_CACHE, allowed_tags=ALLOWED_TAGS)
