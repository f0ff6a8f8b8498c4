import logging

from django import template
from django.conf import settings
from django.utils.safestring import mark_safe

from apps.blocks.compose import render_block_html
from apps.blocks.registry import BlockMissing

register = template.Library()
log = logging.getLogger("blocks.templatetags")


@register.simple_tag(takes_context=True)
def render_block(context, block_id: str, **params):
    """
    Usage : {% load blocks %} ... {% render_block "custom_footer_bottom_block" %}
    Id inconnu : chaîne vide (exception en DEBUG).
    """
    request = context.get("request")
    try:
        return render_block_html(block_id, request, params=params)
    except BlockMissing:
        if settings.DEBUG:
            raise
        log.warning("render_block: unknown block id %r", block_id)
        return mark_safe("")
