# apps/blocks/management/commands/blocks_list.py
from __future__ import annotations
from django.core.management.base import BaseCommand, CommandError, CommandParser

from apps.blocks import registry
from apps.blocks.compose import build_block


class Command(BaseCommand):
    help = "Liste les blocs enregistrés (id, label admin, max-age) ou rend un bloc."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--render", type=str, default=None, help="Id du bloc à rendre sur stdout")

    def handle(self, *args, **options):
        block_id = options.get("render")
        if block_id:
            try:
                built = build_block(block_id)
            except registry.BlockMissing as e:
                raise CommandError(str(e)) from e
            self.stdout.write(str(built["markup"]))
            return

        ids = registry.all_ids()
        if not ids:
            self.stdout.write(self.style.WARNING("Aucun bloc enregistré."))
            return

        self.stdout.write(self.style.SUCCESS("=== Blocs ==="))
        for bid in ids:
            meta = registry.get(bid)
            self.stdout.write(
                f"{bid} | {registry.admin_label(bid)} | max_age={meta.get('cache_max_age', 0)}"
                f" | kill_page_cache={meta.get('kill_page_cache', False)}"
            )
