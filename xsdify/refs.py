""" Inlines local JSON Schema $ref pointers ahead of the XSD walk """

import copy
import logging
from typing import Any, Dict, FrozenSet
from urllib.parse import unquote

import jsonpointer
from jsonpointer import JsonPointerException

logger = logging.getLogger(__name__)


def inline_local_refs(schema: Any) -> Any:
    """Return a copy of the schema with local $ref pointers replaced by their targets.

    External and unresolvable references are kept as they are. A reference that
    points back into one of its own expansions is cyclic and is kept as well.
    """
    return _inline(schema, schema, frozenset())


def _inline(node: Any, document: Any, active: FrozenSet[str]) -> Any:
    if isinstance(node, list):
        return [_inline(item, document, active) for item in node]
    if not isinstance(node, dict):
        return node
    ref = node.get('$ref')
    if isinstance(ref, str):
        target = _resolve(ref, document, active)
        if target is not None:
            merged: Dict[str, Any] = copy.deepcopy(target) if isinstance(target, dict) else {}
            merged.update((k, v) for k, v in node.items() if k != '$ref')
            return _inline(merged, document, active | {ref})
    return {key: _inline(value, document, active) for key, value in node.items()}


def _resolve(ref: str, document: Any, active: FrozenSet[str]) -> Any:
    if not ref.startswith('#'):
        logger.warning("External reference %s is not inlined", ref)
        return None
    if ref in active:
        logger.warning("Cyclic reference %s is not inlined", ref)
        return None
    try:
        return jsonpointer.resolve_pointer(document, unquote(ref[1:]))
    except JsonPointerException as e:
        logger.warning("Cannot resolve reference %s: %s", ref, e)
        return None
