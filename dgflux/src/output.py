"""
Plain-text output for plotting (gnuplot style).

Each series is written as a block of "x value" lines preceded by a "#" header;
blocks are separated by a blank line.
"""

import numpy as np
from pathlib import Path
from typing import Mapping


def write_columns(path, x: np.ndarray, series: Mapping[str, np.ndarray]) -> Path:
    """
    Write one two-column block per series.

    Args:
        path: Output file
        x: Node positions
        series: Mapping of header name -> values at x

    Returns:
        Path of the written file
    """
    path = Path(path)
    x = np.asarray(x, dtype=float)

    blocks = []
    for name, values in series.items():
        values = np.asarray(values, dtype=float)
        if values.shape != x.shape:
            raise ValueError(f"Series '{name}' has shape {values.shape}, expected {x.shape}")
        lines = [f"#         x         {name}"]
        lines += [f"{xi!r}  {vi!r}" for xi, vi in zip(x.tolist(), values.tolist())]
        blocks.append("\n".join(lines))

    path.write_text("\n\n".join(blocks) + "\n")
    return path
