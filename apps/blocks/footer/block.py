# apps/blocks/footer/block.py
from __future__ import annotations
import logging

from django.conf import settings
from django.utils.translation import gettext_lazy as _

from apps.blocks import registry

from . import renderer

logger = logging.getLogger("blocks.footer")

BLOCK_ID = "custom_footer_bottom_block"


def custom_footer(ctx) -> renderer.RenderedFragment:
    """Copyright + conteneur du menu footer (laissé ouvert par défaut)."""
    close_menu = bool(getattr(settings, "BLOCKS_FOOTER_CLOSE_MENU_CONTAINER", False))
    fragment = renderer.render(ctx.site.name, ctx.now, close_menu_container=close_menu)
    logger.debug("FOOTER rendered year=%s site=%r closed=%s", ctx.now.year, ctx.site.name, close_menu)
    return fragment


def register() -> None:
    registry.register(
        BLOCK_ID,
        custom_footer,
        admin_label=_("Custom Footer Block"),
        cache_max_age=renderer.NEVER_CACHE,
        kill_page_cache=True,
        override=True,
    )
