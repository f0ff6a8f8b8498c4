from __future__ import annotations
from django.core.checks import register, Warning, Error
from django.utils.module_loading import import_string

from . import registry


@register()
def registry_not_empty_check(app_configs, **kwargs):
    if not registry.all_ids():
        return [Warning("Aucun bloc enregistré dans le registre.",
                        hint="Appelle registry.register(...) depuis AppConfig.ready().",
                        id="blocks.W001")]
    return []


@register()
def renderer_importable_check(app_configs, **kwargs):
    errors = []
    for block_id in registry.all_ids():
        meta = registry.get(block_id)
        target = meta.get("renderer")
        if isinstance(target, str):
            try:
                target = import_string(target.strip())
            except ImportError:
                errors.append(Error(
                    f"Renderer non importable: {block_id} -> {meta.get('renderer')}",
                    hint="Vérifie le dotted path passé à registry.register().",
                    id="blocks.E001"))
                continue
        if not callable(target):
            errors.append(Error(
                f"Renderer non appelable pour {block_id}: {target!r}",
                id="blocks.E001"))
    return errors


@register()
def cache_max_age_check(app_configs, **kwargs):
    warns = []
    for block_id in registry.all_ids():
        max_age = registry.get(block_id).get("cache_max_age", 0)
        if max_age < 0:
            warns.append(Warning(
                f"cache_max_age négatif pour {block_id}: {max_age}",
                hint="0 = jamais en cache.",
                id="blocks.W002"))
    return warns
