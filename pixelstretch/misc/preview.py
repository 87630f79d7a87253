"""
Before/after preview with matplotlib.

Author: B.G.
"""

import matplotlib.pyplot as plt


def show_before_after(original, result, title=None, output_path=None, show=True):
    """
    Display the original and stretched images side by side.

    Args:
        original: PixelBuffer before the transform
        result: PixelBuffer after the transform
        title: Optional figure title
        output_path: If given, the figure is also saved there
        show: Call plt.show() (blocking) when True

    Returns:
        matplotlib.figure.Figure: The preview figure
    """
    fig, ax = plt.subplots(1, 2, figsize=(10, 5), constrained_layout=True)
    ax[0].imshow(original.to_array())
    ax[0].set_title(f"Original ({original.width}x{original.height})")
    ax[1].imshow(result.to_array())
    ax[1].set_title(f"Stretched ({result.width}x{result.height})")
    for a in ax:
        a.axis("off")
    if title:
        fig.suptitle(title)
    if output_path is not None:
        fig.savefig(output_path, dpi=150)
    if show:
        plt.show()
    return fig
