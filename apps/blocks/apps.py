# apps/blocks/apps.py
from django.apps import AppConfig
import logging

log = logging.getLogger("apps.blocks.apps")


class BlocksConfig(AppConfig):
    name = "apps.blocks"
    verbose_name = "Blocks"

    def ready(self):
        # Enregistrements explicites (pas d'annotation / autodiscovery)
        from .footer import block as footer_block
        from . import checks  # noqa: F401  (enregistre les system checks)
        from .registry import all_ids

        footer_block.register()
        log.info("Blocks registered: %s", ", ".join(all_ids()))
