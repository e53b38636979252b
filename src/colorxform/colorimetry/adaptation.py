"""Bradford chromatic adaptation between reference white points."""

from typing import Sequence, Tuple

import numpy as np

# Bradford cone-response (LMS) matrix
BRADFORD = np.array(
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]
)

BRADFORD_INV = np.linalg.inv(BRADFORD)

BRADFORD.setflags(write=False)
BRADFORD_INV.setflags(write=False)


def same_white_point(a: Sequence[float], b: Sequence[float]) -> bool:
    """Compare two white points component by component."""
    return len(a) == len(b) and all(float(x) == float(y) for x, y in zip(a, b))


def adaptation_matrix(
    source_white: Sequence[float], dest_white: Sequence[float]
) -> np.ndarray:
    """Compute the Bradford adaptation matrix from one white point to another.

    Both white points are taken into LMS space, scaled by the per-cone
    ratio dest / source, and brought back: M_inv @ diag(ratio) @ M.

    Args:
        source_white: (Xn, Yn, Zn) the XYZ values are currently relative to
        dest_white: (Xn, Yn, Zn) to re-express them against

    Returns:
        np.ndarray: 3x3 matrix; exactly the identity for equal white points
    """
    if same_white_point(source_white, dest_white):
        return np.eye(3)

    source_lms = BRADFORD @ np.asarray(source_white, dtype=np.float64)
    dest_lms = BRADFORD @ np.asarray(dest_white, dtype=np.float64)

    return BRADFORD_INV @ np.diag(dest_lms / source_lms) @ BRADFORD


def adapt_xyz(
    xyz: Sequence[float],
    source_white: Sequence[float],
    dest_white: Sequence[float],
) -> Tuple[float, float, float]:
    """Re-express XYZ values relative to a different white point.

    Returns the input values unchanged when the white points are equal.
    """
    if same_white_point(source_white, dest_white):
        return (float(xyz[0]), float(xyz[1]), float(xyz[2]))

    adapted = adaptation_matrix(source_white, dest_white) @ np.asarray(
        xyz, dtype=np.float64
    )
    return (float(adapted[0]), float(adapted[1]), float(adapted[2]))
