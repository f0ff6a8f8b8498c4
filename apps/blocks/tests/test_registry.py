from __future__ import annotations

from django.test import SimpleTestCase

from apps.blocks import registry
from apps.blocks.footer.block import BLOCK_ID, custom_footer


def _noop(ctx):
    return None


class RegistryTests(SimpleTestCase):
    def setUp(self) -> None:
        self.addCleanup(registry.unregister, "test/noop")

    def test_footer_registered_at_startup(self) -> None:
        self.assertTrue(registry.exists(BLOCK_ID))
        meta = registry.get(BLOCK_ID)
        self.assertIs(meta["renderer"], custom_footer)
        self.assertEqual(meta["cache_max_age"], 0)
        self.assertTrue(meta["kill_page_cache"])
        self.assertEqual(registry.admin_label(BLOCK_ID), "Custom Footer Block")

    def test_register_and_get(self) -> None:
        registry.register("test/noop", _noop, admin_label="Noop")
        self.assertIn("test/noop", registry.all_ids())
        self.assertEqual(registry.get("test/noop")["admin_label"], "Noop")

    def test_collision_without_override(self) -> None:
        registry.register("test/noop", _noop)
        with self.assertRaises(registry.BlockCollisionError):
            registry.register("test/noop", _noop)
        registry.register("test/noop", "apps.blocks.footer.block.custom_footer", override=True)
        self.assertIsInstance(registry.get("test/noop")["renderer"], str)

    def test_missing_block(self) -> None:
        with self.assertRaises(registry.BlockMissing) as cm:
            registry.get("does/not/exist")
        self.assertIsInstance(cm.exception, KeyError)
        self.assertFalse(registry.exists("does/not/exist"))

    def test_empty_id_rejected(self) -> None:
        with self.assertRaises(ValueError):
            registry.register("  ", _noop)

    def test_admin_label_defaults_to_id(self) -> None:
        registry.register("test/noop", _noop)
        self.assertEqual(registry.admin_label("test/noop"), "test/noop")
