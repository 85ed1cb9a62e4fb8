"""Identicon configuration.

:class:`IdenticonConfig` bundles everything needed to produce and paint one
identicon. Defaults follow the reference component: an 8x8 grid painted at
4 pixels per cell.
"""

from dataclasses import dataclass
from typing import Optional

from PIL import Image

from blockies.identicon import DEFAULT_SIZE, Identicon, generate_identicon
from blockies.renderer import DEFAULT_SCALE, render


@dataclass(frozen=True)
class IdenticonConfig:
    seed: str
    size: int = DEFAULT_SIZE
    scale: int = DEFAULT_SCALE
    color: Optional[str] = None
    bg_color: Optional[str] = None
    spot_color: Optional[str] = None

    def generate(self) -> Identicon:
        return generate_identicon(
            self.seed,
            self.size,
            color=self.color,
            bg_color=self.bg_color,
            spot_color=self.spot_color,
        )

    def render(self) -> Image.Image:
        return render(self.generate(), scale=self.scale)
