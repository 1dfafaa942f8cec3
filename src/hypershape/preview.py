"""Quick matplotlib preview of a projected frame, for development use."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from hypershape.model.pipeline import ProjectedFrame


def plot_frame(frame: ProjectedFrame, title: Optional[str] = None, show: bool = True) -> Figure:
    """
    Plot the segments and points of a frame on 3D axes.

    Points far away from the origin (projection fallbacks) are drawn too,
    so the axes may stretch when a vertex sits on a singularity.

    Args:
        frame: The frame to draw.
        title: Figure title; defaults to a timestamp.
        show: Call `plt.show()` before returning.

    Returns:
        The created figure.
    """
    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")

    segments = frame.segment_array()
    if len(segments):
        ax.add_collection3d(Line3DCollection(segments, colors="black", linewidths=0.6, alpha=0.6))

    positions = frame.positions()
    if len(positions):
        colors = [c.to_hex() for c in frame.colors] if frame.colors else "tab:blue"
        ax.scatter(positions[:, 0], positions[:, 1], positions[:, 2], c=colors, s=8, depthshade=False)

        low, high = positions.min(axis=0), positions.max(axis=0)
        center = (low + high) / 2
        half = max(float((high - low).max()) / 2, 1e-6)
        ax.set_xlim(center[0] - half, center[0] + half)
        ax.set_ylim(center[1] - half, center[1] + half)
        ax.set_zlim(center[2] - half, center[2] + half)

    ax.set_title(title or f"Frame plotted at {datetime.now().strftime('%d.%m.%Y %H:%M:%S')}")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")

    if show:
        plt.show()
    return fig
