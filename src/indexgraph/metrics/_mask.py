"""Vertex ignore-mask normalization shared by the metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def ignore_mask(ignore: Sequence[bool] | None, vertex_count: int) -> list[bool]:
    """Return a per-vertex list of flags, all ``False`` when *ignore* is ``None``.

    Raises ``ValueError`` if *ignore* does not have one entry per vertex.
    """
    if ignore is None:
        return [False] * vertex_count
    if len(ignore) != vertex_count:
        msg = f"Ignore mask has {len(ignore)} entries but the graph has {vertex_count} vertices"
        raise ValueError(msg)
    return [bool(flag) for flag in ignore]
