"""Vertex and index data for sprites and particle clouds."""

from __future__ import annotations

import math
import random

import numpy as np

# Four corners of a unit square: position (2), colour (3), texture coordinates (2).
_SQUARE = np.array(
    [
        [-0.5, 0.5, 1.0, 0.0, 0.0, 0.0, 0.0],  # top-left
        [0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0],  # top-right
        [0.5, -0.5, 0.0, 0.0, 1.0, 1.0, 1.0],  # bottom-right
        [-0.5, -0.5, 1.0, 1.0, 1.0, 0.0, 1.0],  # bottom-left
    ],
    dtype=np.float32,
)

# Two triangles covering the square.
_FACE = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)

_VERTEX_ATTRIBUTES = 7


class Geometry:
    """A piece of geometry: a vertex table and triangle indices."""

    # (attribute name, component count, offset in floats) within one vertex row
    ATTRIBUTES: tuple[tuple[str, int, int], ...] = ()
    ADDITIVE_BLEND = False

    def __init__(self) -> None:
        self.vertices = np.zeros((0, _VERTEX_ATTRIBUTES), dtype=np.float32)
        self.faces = np.zeros(0, dtype=np.uint32)
        self.size = 0

    def create_geometry(self) -> None:
        """Build the vertex and index data; the base geometry is empty."""


class Sprite(Geometry):
    """A square made of two triangles."""

    ATTRIBUTES = (("vertex", 2, 0), ("color", 3, 2), ("uv", 2, 5))

    def create_geometry(self) -> None:
        self.vertices = _SQUARE.copy()
        self.faces = _FACE.copy()
        self.size = len(self.faces)


class Particles(Geometry):
    """A burst of particles streaming outwards in random directions."""

    ATTRIBUTES = (("vertex", 2, 0), ("dir", 2, 2), ("t", 1, 4), ("uv", 2, 5))
    ADDITIVE_BLEND = True

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random.Random()

    def stream_parameters(self) -> tuple[float, float]:
        """Draw a direction angle and stream length for one particle."""
        theta = 2.0 * math.pi * self._rng.random()
        r = 0.8 * self._rng.random()
        return theta, r

    def create_geometry(self, num_particles: int) -> None:
        """Build ``num_particles`` vertex rows, sharing random values per group of four."""
        rows: list[list[float]] = []
        for group_start in range(0, num_particles, 4):
            theta, r = self.stream_parameters()
            phase = self._rng.random()
            direction = (math.sin(theta) * r, math.cos(theta) * r)
            for corner in _SQUARE[: min(4, num_particles - group_start)]:
                rows.append(
                    [corner[0], corner[1], direction[0], direction[1], phase, corner[5], corner[6]]
                )
        self.vertices = np.array(rows, dtype=np.float32).reshape(-1, _VERTEX_ATTRIBUTES)
        offsets = np.repeat(np.arange(num_particles, dtype=np.uint32) * 4, len(_FACE))
        self.faces = (np.tile(_FACE, num_particles) + offsets).astype(np.uint32)
        self.size = num_particles * len(_FACE)


class BloodParticles(Particles):
    """A narrower, longer spray of particles opening backwards."""

    def stream_parameters(self) -> tuple[float, float]:
        theta = self._rng.random() * math.pi + math.pi / 2
        r = 0.5 + 0.5 * self._rng.random()
        return theta, r