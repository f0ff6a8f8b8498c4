# apps/blocks/registry.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, TypedDict, Union

log = logging.getLogger("blocks.registry")


class BlockMeta(TypedDict, total=False):
    id: str
    admin_label: Any
    renderer: Union[str, Callable[..., Any]]
    cache_max_age: int
    kill_page_cache: bool
    params: dict


# Stockage en mémoire, ordre d'enregistrement conservé
_BLOCKS: Dict[str, BlockMeta] = {}


class BlockMissing(KeyError):
    """Bloc introuvable dans le registre."""

    def __init__(self, block_id: str):
        super().__init__(block_id)
        self.block_id = block_id

    def __str__(self) -> str:  # pragma: no cover - string repr helper
        return f"Block '{self.block_id}' is not registered. Known: {all_ids()}"


class BlockCollisionError(ValueError):
    """Identifiant de bloc déjà enregistré (override=False)."""


# ---------------------------
# API publique du registry
# ---------------------------
def register(
    block_id: str,
    renderer: Union[str, Callable[..., Any]],
    *,
    admin_label: Any = "",
    cache_max_age: int = 0,
    kill_page_cache: bool = False,
    params: Optional[dict] = None,
    override: bool = False,
) -> BlockMeta:
    """
    Enregistre un bloc : `renderer` est un callable `(ctx) -> RenderedFragment`
    ou son dotted path (résolu paresseusement par le pipeline).
    """
    slug = (block_id or "").strip()
    if not slug:
        raise ValueError("block_id vide.")
    if slug in _BLOCKS and not override:
        raise BlockCollisionError(f"collision for block '{slug}' (override=False)")

    meta: BlockMeta = {
        "id": slug,
        "admin_label": admin_label or slug,
        "renderer": renderer,
        "cache_max_age": int(cache_max_age),
        "kill_page_cache": bool(kill_page_cache),
        "params": dict(params or {}),
    }
    _BLOCKS[slug] = meta
    log.debug("Block registered: %s", slug)
    return meta


def unregister(block_id: str) -> None:
    _BLOCKS.pop(block_id, None)


def get(block_id: str) -> BlockMeta:
    meta = _BLOCKS.get(block_id)
    if not meta:
        raise BlockMissing(block_id)
    return meta


def exists(block_id: str) -> bool:
    return block_id in _BLOCKS


def all_ids() -> List[str]:
    return list(_BLOCKS.keys())


def admin_label(block_id: str) -> str:
    return str(get(block_id).get("admin_label") or block_id)
