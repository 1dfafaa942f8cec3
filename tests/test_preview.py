from matplotlib.figure import Figure
import matplotlib.pyplot as plt

from hypershape.model.coloring import ColorMapping4D
from hypershape.model.pipeline import project_geometry
from hypershape.model.projection import Projection4D
from hypershape.model.rotation import Rotation4D
from hypershape.preview import plot_frame
from hypershape.shapes import generate


def test_plot_frame_returns_figure():
    frame = project_geometry(generate("tesseract"), Rotation4D(0.2, 0.3, 0.1, 0.4), Projection4D(), ColorMapping4D())
    fig = plot_frame(frame, title="tesseract", show=False)
    try:
        assert isinstance(fig, Figure)
        assert fig.axes[0].get_title() == "tesseract"
    finally:
        plt.close(fig)
