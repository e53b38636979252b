"""RGB to XYZ matrix derivation from profile chromaticities."""

import numpy as np

from ..errors import DegenerateProfileError
from ..profiles import Profile


def _primaries_matrix(profile: Profile) -> np.ndarray:
    """Stack the red, green and blue chromaticities as matrix columns."""
    return np.array([profile.red, profile.green, profile.blue], dtype=np.float64).T


def rgb_to_xyz_matrix(profile: Profile) -> np.ndarray:
    """Derive the linear RGB -> XYZ matrix of a profile.

    With the primaries P as columns, the per-primary scale factors S solve
    P @ S = white, and the result is M = P @ diag(S). M maps linear
    (1, 1, 1) to the profile's white point.

    Args:
        profile: RGB profile

    Returns:
        np.ndarray: 3x3 matrix M with XYZ = M @ rgb

    Raises:
        DegenerateProfileError: If the primaries are linearly dependent
    """
    primaries = _primaries_matrix(profile)
    white = np.array(profile.white, dtype=np.float64)

    if np.linalg.matrix_rank(primaries) < 3:
        raise DegenerateProfileError(profile.name, "primaries are linearly dependent")

    try:
        scale = np.linalg.solve(primaries, white)
    except np.linalg.LinAlgError as e:
        raise DegenerateProfileError(profile.name, str(e)) from e

    if not np.all(np.isfinite(scale)):
        raise DegenerateProfileError(profile.name, "scale factors are not finite")

    return primaries @ np.diag(scale)


def xyz_to_rgb_matrix(profile: Profile) -> np.ndarray:
    """Inverse of :func:`rgb_to_xyz_matrix`, for inspection."""
    return np.linalg.inv(rgb_to_xyz_matrix(profile))


def decompose_matrix(matrix: np.ndarray, name: str = "decomposed") -> Profile:
    """Recover the profile an RGB -> XYZ matrix was derived from.

    Args:
        matrix: 3x3 RGB -> XYZ matrix
        name: Name for the returned profile

    Returns:
        Profile whose white point is M @ (1, 1, 1) and whose primaries are
        the columns of M normalized to unit sum

    Raises:
        DegenerateProfileError: If a column sums to zero
    """
    m = np.asarray(matrix, dtype=np.float64)
    column_sums = m.sum(axis=0)

    try:
        primaries = m @ np.linalg.inv(np.diag(column_sums))
    except np.linalg.LinAlgError as e:
        raise DegenerateProfileError(name, "a matrix column sums to zero") from e
    white = m @ np.ones(3)

    red, green, blue = (tuple(float(v) for v in column) for column in primaries.T)

    return Profile(
        name=name,
        white=tuple(float(v) for v in white),
        red=red,
        green=green,
        blue=blue,
    )
