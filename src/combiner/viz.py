from __future__ import annotations
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np


class Visualizer:
    """Preview of the reconciled inputs next to the combined result (--show)."""

    @staticmethod
    def show_side_by_side(
        images: Sequence[np.ndarray],
        titles: Optional[Sequence[str]] = None,
        figsize: Tuple[int, int] = (15, 5),
        show: bool = True,
    ) -> plt.Figure:
        n = len(images)
        titles = titles or [f"Image {i+1}" for i in range(n)]

        fig, axes = plt.subplots(1, n, figsize=figsize)
        if n == 1:
            axes = [axes]

        for ax, img, title in zip(axes, images, titles):
            ax.imshow(img, interpolation="nearest")  # keep the pixel pattern visible
            ax.set_title(title)
            ax.axis("off")

        fig.tight_layout()
        if show:
            plt.show()
        return fig
