"""Adjacency graph over recognized tiles and its decomposition into words."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import cv2
import numpy as np

from snatcher.constants import ADJACENCY_AREA_FACTOR
from snatcher.tile import LetterTile

AdjacencyFn = Callable[[LetterTile, LetterTile], bool]
LetterGraph = dict[LetterTile, set[LetterTile]]


def build_letter_graph(tiles: Iterable[LetterTile], is_adjacent: AdjacencyFn) -> LetterGraph:
    """Connect every pair of tiles (including a tile with itself) that *is_adjacent* accepts.

    Edges are inserted in both directions, so a symmetric predicate yields an
    undirected graph. A predicate that is not symmetric is not detected.
    """
    tiles = list(tiles)
    graph: LetterGraph = {}
    for u in tiles:
        for v in tiles:
            if is_adjacent(u, v):
                graph.setdefault(u, set()).add(v)
                graph.setdefault(v, set()).add(u)
    return graph


def bounding_box_adjacency(u: LetterTile, v: LetterTile,
                           factor: float = ADJACENCY_AREA_FACTOR) -> bool:
    """Two tiles are adjacent if the smallest rotated box around both is compact.

    The minimum-area rectangle enclosing all eight corners is compared with
    *factor* times the mean area of the two tiles.
    """
    points = np.vstack([u.corners(), v.corners()]).astype(np.float32)
    _, (width, height), _ = cv2.minAreaRect(points)
    average_area = 0.5 * (u.area + v.area)
    return width * height < factor * average_area


def _reading_order(members: list[LetterTile]) -> list[LetterTile]:
    """Sort tiles along the principal axis of their centers.

    The axis is oriented so that words read left-to-right, or top-to-bottom
    when the component is mostly vertical. Ties keep traversal order.
    """
    if len(members) < 2:
        return members

    centers = np.array([t.center for t in members], dtype=float)
    offsets = centers - centers.mean(axis=0)
    _, vectors = np.linalg.eigh(offsets.T @ offsets)
    axis = vectors[:, -1]  # largest eigenvalue
    dominant = 0 if abs(axis[0]) >= abs(axis[1]) else 1
    if axis[dominant] < 0:
        axis = -axis

    projections = offsets @ axis
    order = sorted(range(len(members)), key=lambda i: projections[i])
    return [members[i] for i in order]


def find_connected_components(graph: LetterGraph, reading_order: bool = True) -> list[str]:
    """Split the graph into connected components, one word per component.

    Traversal is depth-first with an explicit stack. With *reading_order*
    the letters of each component are arranged along its dominant axis;
    otherwise they appear in visitation order.
    """
    visited: set[LetterTile] = set()
    words: list[str] = []

    for start in graph:
        if start in visited:
            continue

        members: list[LetterTile] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            members.append(node)
            stack.extend(n for n in graph.get(node, ()) if n not in visited)

        if reading_order:
            members = _reading_order(members)
        words.append("".join(t.letter for t in members))

    return words


def assemble_words(tiles: Iterable[LetterTile],
                   is_adjacent: AdjacencyFn = bounding_box_adjacency,
                   reading_order: bool = True) -> list[str]:
    """Group recognized tiles into the words lying on the board."""
    graph = build_letter_graph(tiles, is_adjacent)
    return find_connected_components(graph, reading_order=reading_order)
