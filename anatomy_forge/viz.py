# anatomy_forge/viz.py
"""
VISUALIZATION: PLOTTING THE BIND POSE
=====================================

PURPOSE:
--------
Draw a generated skeleton as a 3D stick figure: one line segment per joint,
from the parent's world position to the child's. Useful for eyeballing
proportions, checking that the two sides mirror, and spotting a bone that
ended up somewhere it should not be.

The plot uses the anatomical axes directly:

    plot x  = lateral (left is +x)
    plot y  = forward
    plot z  = up

COLOR MODES:
------------
- 'side': left / right / midline in three colors
- 'mass': segments shaded by the child bone's mass (log scale)
"""

import logging
from typing import Dict, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import LogNorm
from matplotlib.lines import Line2D

from .catalog import Bone, Side, side_of
from .kernel.registry import JOINT_REGISTRY, JointRegistry
from .model import BoneDefinition
from .post import world_positions

logger = logging.getLogger(__name__)

# =============================================================================
# COLOR PALETTE
# =============================================================================

COLORS = {
    'left': '#3498DB',          # Sky blue
    'right': '#E74C3C',         # Coral red
    'center': '#2C3E50',        # Dark blue-gray (spine, skull)
    'joint': '#7F8C8D',         # Gray
    'background': '#FAFAFA',    # Off-white
    'text': '#2C3E50',
}

COLOR_MODES = ('side', 'mass')


def _to_plot(p: np.ndarray) -> np.ndarray:
    """Anatomical (x lateral, y up, z forward) -> plot (x, forward, up)."""
    return np.array([p[0], p[2], p[1]])


def _set_equal_aspect(ax, points: np.ndarray) -> None:
    # Equal scaling so limbs do not look stretched
    center = points.mean(axis=0)
    radius = max(np.ptp(points, axis=0).max() / 2, 1e-6)
    ax.set_xlim(center[0] - radius, center[0] + radius)
    ax.set_ylim(center[1] - radius, center[1] + radius)
    ax.set_zlim(center[2] - radius, center[2] + radius)


def plot_skeleton(
    skeleton: Dict[Bone, BoneDefinition],
    outpath: Optional[str] = None,
    title: str = "Skeleton (bind pose)",
    color_by: str = 'side',
    registry: Optional[JointRegistry] = None,
):
    """
    Plot parent-child segments of a skeleton in 3D.

    Parameters:
    -----------
    skeleton : Dict[Bone, BoneDefinition]
        Output of generate_body
    outpath : str, optional
        If given, save the figure there (PNG etc.) and close it.
        If None, return the figure.
    title : str
        Plot title
    color_by : str
        'side' or 'mass'
    registry : JointRegistry, optional
        Hierarchy used for segments (default: JOINT_REGISTRY)

    Returns:
    --------
    matplotlib.figure.Figure or None
        The figure when outpath is None, otherwise None

    Raises:
    -------
    ValueError
        Unknown color_by, or an empty skeleton
    """
    if color_by not in COLOR_MODES:
        raise ValueError(f"Unknown color_by: {color_by} (expected one of {COLOR_MODES})")
    if not skeleton:
        raise ValueError("Cannot plot an empty skeleton")

    registry = registry if registry is not None else JOINT_REGISTRY
    world = {bone: _to_plot(p) for bone, p in world_positions(skeleton, registry).items()}

    fig = plt.figure(figsize=(8, 10), facecolor=COLORS['background'])
    ax = fig.add_subplot(111, projection='3d')

    masses = [d.mass for d in skeleton.values() if d.mass > 0]
    norm = LogNorm(vmin=min(masses), vmax=max(masses)) if masses else None
    cmap = plt.get_cmap('viridis')

    n_segments = 0
    for parent, child in registry.edges():
        if parent not in world or child not in world:
            continue
        a, b = world[parent], world[child]

        if color_by == 'side':
            side = side_of(child)
            color = COLORS['center'] if side is None else COLORS[side.value.lower()]
        else:
            mass = skeleton[child].mass
            color = cmap(norm(mass)) if norm is not None and mass > 0 else COLORS['joint']

        ax.plot([a[0], b[0]], [a[1], b[1]], [a[2], b[2]], color=color, linewidth=1.5)
        n_segments += 1

    points = np.array(list(world.values()))
    ax.scatter(points[:, 0], points[:, 1], points[:, 2], s=4, color=COLORS['joint'])
    _set_equal_aspect(ax, points)

    ax.set_xlabel('Lateral (m)')
    ax.set_ylabel('Forward (m)')
    ax.set_zlabel('Up (m)')
    ax.set_title(title, fontsize=14, fontweight='bold', color=COLORS['text'])

    if color_by == 'side':
        legend_elements = [
            Line2D([0], [0], color=COLORS['left'], linewidth=2, label=Side.LEFT.value.title()),
            Line2D([0], [0], color=COLORS['right'], linewidth=2, label=Side.RIGHT.value.title()),
            Line2D([0], [0], color=COLORS['center'], linewidth=2, label='Midline'),
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=9)
    elif norm is not None:
        mappable = plt.cm.ScalarMappable(norm=norm, cmap=cmap)
        mappable.set_array([])
        fig.colorbar(mappable, ax=ax, shrink=0.6, label='Bone mass (kg)')

    logger.debug("Plotted %d segments (color_by=%s)", n_segments, color_by)

    if outpath is None:
        return fig

    plt.tight_layout()
    plt.savefig(outpath, dpi=150, bbox_inches='tight')
    plt.close(fig)  # Close to free memory
    logger.info("Saved skeleton plot to %s", outpath)
    return None
