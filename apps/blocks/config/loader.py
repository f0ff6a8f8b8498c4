# apps/blocks/config/loader.py
from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping
import logging
import yaml

from django.conf import settings

from apps.blocks.footer.renderer import SiteIdentity

log = logging.getLogger("blocks.config")

SITE_CONFIG = "system.site"
_SUFFIXES = (".yml", ".yaml")


class SiteConfigError(ValueError):
    """Fichier de configuration illisible ou mal formé."""


def _cfg_root() -> Path:
    root = getattr(settings, "SITE_CONFIG_DIR", None)
    if root:
        return Path(root)
    return Path(settings.BASE_DIR) / "configs" / "site"


def _find_file(name: str) -> Path | None:
    root = _cfg_root()
    for suffix in _SUFFIXES:
        candidate = root / f"{name}{suffix}"
        if candidate.exists():
            return candidate
    return None


@lru_cache(maxsize=32)
def _load_yaml(name: str) -> Dict[str, Any]:
    path = _find_file(name)
    if path is None:
        log.debug("Config '%s' absente sous %s → vide.", name, _cfg_root())
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SiteConfigError(f"YAML invalide ({path}): {e}") from e
    if not isinstance(data, dict):
        raise SiteConfigError(f"{path}: attendu un mapping, reçu {type(data).__name__}.")
    return data


class SiteConfig:
    """Vue lecture seule d'une config nommée (YAML + overrides settings)."""

    def __init__(self, name: str, data: Mapping[str, Any]):
        self.name = name
        self._data = dict(data or {})

    def get_original(self, key: str, default: Any = False) -> Any:
        return self._data.get(key, default)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __repr__(self) -> str:  # pragma: no cover
        return f"SiteConfig({self.name!r}, keys={sorted(self._data)})"


def get_config(name: str) -> SiteConfig:
    data = dict(_load_yaml(name))
    overrides = (getattr(settings, "SITE_CONFIG_OVERRIDES", None) or {}).get(name) or {}
    if isinstance(overrides, Mapping):
        data.update(overrides)
    return SiteConfig(name, data)


def site_identity() -> SiteIdentity:
    return SiteIdentity.from_config(get_config(SITE_CONFIG).get_original("name", False))


def reload() -> None:
    _load_yaml.cache_clear()
