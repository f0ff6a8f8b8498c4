# apps/blocks/views.py
from __future__ import annotations

import logging
from django.http import Http404, HttpResponse
from django.utils.cache import add_never_cache_headers, patch_cache_control
from django.views import View

from apps.blocks.compose import build_block
from apps.blocks.registry import BlockMissing

log = logging.getLogger("blocks.views")


class BlockFragmentView(View):
    """Rend un bloc seul (fragment HTML), utile pour l'ESI / le chargement async."""

    def get(self, request, block_id: str, *args, **kwargs):
        try:
            built = build_block(block_id, request)
        except BlockMissing:
            raise Http404(f"Unknown block '{block_id}'")

        response = HttpResponse(built["markup"], content_type="text/html; charset=utf-8")
        max_age = built["cache"]["max_age"]
        if max_age <= 0:
            add_never_cache_headers(response)
        else:
            patch_cache_control(response, public=True, max_age=max_age)
        return response
