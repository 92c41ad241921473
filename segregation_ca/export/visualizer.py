"""Static image export for Segregation CA simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from matplotlib.patches import Patch
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image
import io

from ..model.actor import Actor

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Visualizer:
    """
    Renders grid snapshots using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation
    """

    # Color scheme
    COLORS = {
        Actor.BLUE: '#1F5FBF',
        Actor.RED: '#D62728',
        Actor.NONE: '#FFFFFF',
    }

    def __init__(self, side_length: int):
        self.side_length = side_length
        self.frames: List[Image.Image] = []

    def to_rgb_image(self, cells: np.ndarray) -> np.ndarray:
        """Map actor codes to an (N, N, 3) RGB array."""
        image = np.ones((self.side_length, self.side_length, 3))
        for actor, color in self.COLORS.items():
            image[cells == int(actor)] = to_rgb(color)
        return image

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        fig, ax = plt.subplots(figsize=(6, 6))

        ax.imshow(self.to_rgb_image(state.grid), origin='upper',
                  interpolation='nearest')

        ax.set_title(f'Step {state.step} | '
                     f'Satisfied: {state.metrics.get("satisfied_fraction", 0):.2%} | '
                     f'Segregation: {state.metrics.get("segregation_index", 0):.3f}')
        ax.set_xticks([])
        ax.set_yticks([])

        legend_elements = [
            Patch(facecolor=self.COLORS[Actor.BLUE], label='Blue'),
            Patch(facecolor=self.COLORS[Actor.RED], label='Red'),
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8,
                  bbox_to_anchor=(1.0, -0.02), ncol=2)

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 4) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )
