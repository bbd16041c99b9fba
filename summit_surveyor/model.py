"""Render layers of models and the geometry of the screen plane."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

import numpy as np


class RenderLayer(enum.Enum):
    DO_NOT_RENDER = "do_not_render"
    """Never render the object."""
    MAIN = "main"
    """Render in the main world."""


@dataclass
class ModelRenderData:
    """Which layer a model is rendered in."""

    layer: RenderLayer = RenderLayer.MAIN

    def with_layer(self, layer: RenderLayer) -> ModelRenderData:
        return replace(self, layer=layer)


_SCREEN_INDICES = (0, 1, 3, 0, 3, 2)


def screen_plane_mesh(z: float) -> tuple[bytes, tuple[int, ...]]:
    """Vertices and indices of a full-screen quad at depth ``z``.

    Each vertex is a position (x, y, z) followed by texture coordinates (u, v),
    stored as native-endian 32-bit floats.
    """
    vertices = np.array(
        [
            [-1.0, -1.0, z, 0.0, 1.0],
            [1.0, -1.0, z, 1.0, 1.0],
            [-1.0, 1.0, z, 0.0, 0.0],
            [1.0, 1.0, z, 1.0, 0.0],
        ],
        dtype=np.float32,
    )
    return vertices.tobytes(), _SCREEN_INDICES