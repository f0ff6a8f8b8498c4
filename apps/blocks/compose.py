# apps/blocks/compose.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Optional
import logging

from django.conf import settings
from django.utils import timezone
from django.utils.module_loading import import_string
from django.utils.safestring import SafeString, mark_safe

from apps.blocks import registry
from apps.blocks.config.loader import site_identity
from apps.blocks.footer.renderer import RenderedFragment, SiteIdentity
from apps.blocks.sanitizer import filter_allowed
from apps.blocks.services import page_cache_kill_switch

log = logging.getLogger("blocks.compose")


@dataclass(frozen=True)
class BlockContext:
    """Collaborateurs déjà résolus, passés explicitement au renderer."""
    request: Any
    site: SiteIdentity
    now: datetime
    params: Dict[str, Any] = field(default_factory=dict)


@lru_cache(maxsize=64)
def _import_callable(dotted_path: str):
    return import_string(dotted_path)


def _resolve_renderer(meta: registry.BlockMeta):
    target = meta.get("renderer")
    if isinstance(target, str):
        return _import_callable(target.strip())
    return target


def _now(now: Optional[datetime]) -> datetime:
    if now is not None:
        return now
    # heure locale du projet (TIME_ZONE), comme date('Y') côté hôte
    return timezone.localtime() if settings.USE_TZ else timezone.now()


def _empty(meta: registry.BlockMeta) -> Dict[str, Any]:
    return {
        "block_id": meta.get("id"),
        "admin_label": str(meta.get("admin_label") or ""),
        "markup": mark_safe(""),
        "cache": {"max_age": 0},
        "allowed_tags": [],
    }


def build_block(
    block_id: str,
    request=None,
    *,
    now: Optional[datetime] = None,
    params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Construit le render array d'un bloc :
      {block_id, admin_label, markup (filtré allowlist), cache: {max_age}, allowed_tags}

    BlockMissing remonte à l'appelant ; une erreur du renderer est loggée
    et produit un fragment vide (max_age 0).
    """
    meta = registry.get(block_id)

    merged_params = dict(meta.get("params") or {})
    merged_params.update(params or {})
    ctx = BlockContext(request=request, site=site_identity(), now=_now(now), params=merged_params)

    try:
        fn = _resolve_renderer(meta)
        fragment = fn(ctx)
    except Exception:
        log.exception("Block render failed for id=%s", block_id)
        page_cache_kill_switch.trigger(request)
        return _empty(meta)

    if not isinstance(fragment, RenderedFragment):
        log.warning("Block %s returned %s instead of RenderedFragment. Ignored.", block_id, type(fragment).__name__)
        page_cache_kill_switch.trigger(request)
        return _empty(meta)

    max_age = min(int(meta.get("cache_max_age", 0)), int(fragment.cache_max_age))
    if meta.get("kill_page_cache") or max_age <= 0:
        page_cache_kill_switch.trigger(request)

    markup = filter_allowed(fragment.markup, fragment.allowed_tags)
    log.debug("Block %s built (max_age=%s, %d allowed tags)", block_id, max_age, len(fragment.allowed_tags))
    return {
        "block_id": meta.get("id"),
        "admin_label": str(meta.get("admin_label") or ""),
        "markup": mark_safe(markup),
        "cache": {"max_age": max(0, max_age)},
        "allowed_tags": sorted(fragment.allowed_tags),
    }


def render_block_html(block_id: str, request=None, **kwargs) -> SafeString:
    return build_block(block_id, request, **kwargs)["markup"]
