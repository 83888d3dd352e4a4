"""2D renderer using matplotlib."""

import time
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from typing import Optional, Sequence, Tuple
from dust_sim.render.base import Renderer, snapshot_to_points


class Renderer2D(Renderer):
    """2D view of the universe with depth-scaled dust.
    
    Particle size and opacity grow with the depth value z, giving a cheap
    parallax look. Axes are pinned to the world bounds.
    """
    
    def __init__(
        self,
        width: float,
        height: float,
        figsize: Tuple[int, int] = (10, 8),
        dpi: int = 100,
        interactive: bool = True,
        target_fps: float = 30.0
    ):
        """Initialize 2D renderer.
        
        Args:
            width: World width (x axis limit)
            height: World height (y axis limit)
            figsize: Figure size (width, height)
            dpi: Dots per inch
            interactive: Show a window; if False draw off-screen only
            target_fps: Frame rate cap for interactive drawing
        """
        self.width = width
        self.height = height
        self.figsize = figsize
        self.dpi = dpi
        self.interactive = interactive
        
        self.fig: Optional[Figure] = None
        self.ax = None
        self.dust = None
        self.initialized = False
        
        self.frame_time = 1.0 / target_fps
        self.last_render_time = 0.0
    
    def _initialize(self):
        """Create the figure if not already done."""
        if self.initialized:
            return
        if self.interactive:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        else:
            self.fig = Figure(figsize=self.figsize, dpi=self.dpi)
            FigureCanvasAgg(self.fig)
            self.ax = self.fig.add_subplot(1, 1, 1)
        self._style_axes()
        
        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)
        
        self.initialized = True
    
    def _style_axes(self):
        self.ax.set_facecolor('black')
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(0, self.height)
        self.ax.set_aspect('equal')
        self.ax.set_title('Dust Simulation')
    
    def _is_figure_open(self) -> bool:
        """Check if the interactive window is still open."""
        if not self.interactive:
            return self.fig is not None
        if self.fig is None or not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True
    
    def render(self, snapshot, stars: Sequence = (), black_holes: Sequence = ()):
        """Render current frame."""
        # Window closed by the user: stop drawing
        if self.initialized and not self._is_figure_open():
            return
        
        current_time = time.time()
        if self.interactive and self.initialized and (current_time - self.last_render_time) < self.frame_time:
            return
        self.last_render_time = current_time
        
        self._initialize()
        points = snapshot_to_points(snapshot)
        depth = np.clip(points[:, 2], 0.0, 1.0)
        sizes = 0.5 + 3.5 * depth
        colors = np.zeros((points.shape[0], 4))
        colors[:, :3] = 1.0
        colors[:, 3] = 0.3 + 0.7 * depth
        
        self.ax.clear()
        self._style_axes()
        if points.shape[0] > 0:
            self.dust = self.ax.scatter(points[:, 0], points[:, 1], s=sizes, c=colors, linewidths=0)
        
        if len(stars) > 0:
            self.ax.scatter(
                [s.x for s in stars], [s.y for s in stars],
                s=80, c='gold', marker='*', edgecolors='orange', linewidths=0.5
            )
        if len(black_holes) > 0:
            self.ax.scatter(
                [b.x for b in black_holes], [b.y for b in black_holes],
                s=120, c='black', edgecolors='purple', linewidths=1.5
            )
        
        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)
        else:
            self.fig.canvas.draw()
    
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return np.array(rgba[:, :, :3], dtype=np.uint8)
    
    def clear(self):
        """Clear the renderer."""
        if self.ax is not None:
            self.ax.clear()
    
    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            if self.interactive:
                plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.dust = None
            self.initialized = False
