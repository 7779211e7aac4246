# stillworld/core/noise_adapter.py
"""
Drift noise adapter over OpenSimplex.

The camera drift and mote wander expect smooth noise in [0, 1] that changes
slowly with its inputs. OpenSimplex returns ~[-1, 1] for a single octave, so we
sum a few octaves with halving amplitude and remap to [0, 1].
"""
from __future__ import annotations

from typing import Callable

from opensimplex import OpenSimplex

from stillworld.utils.camera_utils import clamp

NoiseFn = Callable[[float, float], float]


class DriftNoise:
    def __init__(self, seed: int, *, octaves: int = 4, falloff: float = 0.5) -> None:
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        self.seed = int(seed)
        self.octaves = int(octaves)
        self.falloff = float(falloff)
        self._gen = OpenSimplex(seed=self.seed)
        # Sum of amplitudes, used to normalise back into [-1, 1]
        self._norm = sum(self.falloff ** i for i in range(self.octaves))

    def noise(self, x: float, y: float) -> float:
        """Fractal noise in [0, 1]; deterministic for a given seed."""
        total = 0.0
        amp = 1.0
        freq = 1.0
        for _ in range(self.octaves):
            total += self._gen.noise2(x * freq, y * freq) * amp
            amp *= self.falloff
            freq *= 2.0
        return clamp((total / self._norm + 1.0) * 0.5, 0.0, 1.0)

    __call__ = noise
