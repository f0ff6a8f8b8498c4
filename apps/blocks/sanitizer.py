# apps/blocks/sanitizer.py
"""
Filtre d'allowlist appliqué aux fragments de blocs avant sortie.

- balises autorisées : ré-émises telles quelles (attributs filtrés)
- balises refusées : retirées, leur texte est conservé (échappé)
- commentaires / déclarations : retirés
- pas de reconstruction d'arbre : une balise laissée ouverte reste ouverte
"""
from __future__ import annotations
from html import escape
from html.parser import HTMLParser
from typing import Iterable, List, Optional, Tuple

_URL_ATTRS = {"href", "src", "action", "formaction", "xlink:href"}
_BAD_SCHEMES = ("javascript:", "vbscript:", "data:text/html")
# Contenu brut (CDATA) : jeté entièrement si la balise est refusée
_RAW_TEXT_TAGS = {"script", "style"}


def _unsafe_url(value: str) -> bool:
    compact = "".join(ch for ch in (value or "") if not ch.isspace()).lower()
    return compact.startswith(_BAD_SCHEMES)


class _AllowlistFilter(HTMLParser):
    def __init__(self, allowed: Iterable[str]):
        super().__init__(convert_charrefs=True)
        self.allowed = {str(t).strip().lower() for t in allowed or () if str(t).strip()}
        self.out: List[str] = []
        self._skip_raw: Optional[str] = None

    # ---- helpers ----
    def _attrs(self, attrs: List[Tuple[str, Optional[str]]]) -> str:
        kept: List[str] = []
        for name, value in attrs:
            key = (name or "").lower()
            if not key or key.startswith("on"):
                continue
            if key in _URL_ATTRS and value is not None and _unsafe_url(value):
                continue
            if value is None:
                kept.append(f" {key}")
            else:
                kept.append(f' {key}="{escape(value, quote=True)}"')
        return "".join(kept)

    # ---- HTMLParser hooks ----
    def handle_starttag(self, tag, attrs):
        if self._skip_raw:
            return
        if tag in self.allowed:
            self.out.append(f"<{tag}{self._attrs(attrs)}>")
        elif tag in _RAW_TEXT_TAGS:
            self._skip_raw = tag

    def handle_startendtag(self, tag, attrs):
        if self._skip_raw:
            return
        if tag in self.allowed:
            self.out.append(f"<{tag}{self._attrs(attrs)} />")

    def handle_endtag(self, tag):
        if self._skip_raw:
            if tag == self._skip_raw:
                self._skip_raw = None
            return
        if tag in self.allowed:
            self.out.append(f"</{tag}>")

    def handle_data(self, data):
        if self._skip_raw:
            return
        if self.cdata_elem and self.cdata_elem in self.allowed:
            # contenu brut d'un élément CDATA autorisé (<script>, <style>)
            self.out.append(data)
            return
        # texte, y compris le contenu CDATA/RCDATA d'une balise refusée
        # (xmp, iframe, textarea... selon la version de HTMLParser)
        self.out.append(escape(data, quote=False))

    def handle_comment(self, data):
        return

    def handle_decl(self, decl):
        return

    def handle_pi(self, data):
        return

    def unknown_decl(self, data):
        return


def filter_allowed(markup: str, allowed_tags: Iterable[str]) -> str:
    """Retourne `markup` réduit aux balises de `allowed_tags`."""
    if not markup:
        return ""
    parser = _AllowlistFilter(allowed_tags)
    parser.feed(str(markup))
    parser.close()
    return "".join(parser.out)
