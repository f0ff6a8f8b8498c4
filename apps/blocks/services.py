# apps/blocks/services.py
from __future__ import annotations
import logging

log = logging.getLogger("blocks.services")

_FLAG = "_page_cache_killed"


class PageCacheKillSwitch:
    """
    Marque la requête courante comme non cacheable.
    L'effet (headers never-cache) est appliqué par PageCacheKillSwitchMiddleware.
    """

    def trigger(self, request) -> None:
        if request is None:
            return
        setattr(request, _FLAG, True)
        log.debug("Page cache kill switch triggered for %s", getattr(request, "path", "?"))

    def is_triggered(self, request) -> bool:
        return bool(getattr(request, _FLAG, False))


page_cache_kill_switch = PageCacheKillSwitch()
