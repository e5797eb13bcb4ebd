"""Unique naming of glTF scenes, nodes and animations."""

import logging
from typing import Sequence, Set

logger = logging.getLogger(__name__)


def fixup_names(entities: Sequence, pretty_name: str, prefix: str) -> int:
    """
    Give every entity a non-empty, unique name.

    Unnamed entities are called ``<prefix><index>``. A name already taken
    by an earlier entity gets ``_<index>`` appended until it is free, so
    earlier entities keep contested names. Entities are renamed in place.

    Args:
        entities: pygltflib objects with a ``name`` attribute
        pretty_name: Entity kind used in log messages (e.g. "Node")
        prefix: Prefix for synthesized names (e.g. "node_")

    Returns:
        Number of renamed entities
    """
    names: Set[str] = set()
    renamed_count = 0

    for i, entity in enumerate(entities):
        original = entity.name
        name = original or f"{prefix}{i}"

        while name in names:
            name = f"{name}_{i}"

        names.add(name)

        if name != original:
            logger.info('%s #%d with name "%s" was renamed to "%s" in order to avoid duplicates.',
                        pretty_name, i, original or "", name)
            entity.name = name
            renamed_count += 1

    return renamed_count
