import numpy as np

from .errors import DimensionMismatch


def euclidean_distance(point1, point2):
    point1 = np.asarray(point1, dtype=np.float64)
    point2 = np.asarray(point2, dtype=np.float64)
    if point1.shape != point2.shape:
        raise DimensionMismatch(f"Cannot compare points of shape {point1.shape} and {point2.shape}")
    return float(np.sqrt(((point1 - point2) ** 2).sum()))


def distances_to_centroids(points, centroids):
    """Euclidean distance matrix of shape (n, K) between a block of points and all centroids."""
    if points.shape[1] != centroids.shape[1]:
        raise DimensionMismatch(
            f"Points have dimension {points.shape[1]}, centroids have dimension {centroids.shape[1]}"
        )
    # (n, 1, D) - (1, K, D) -> (n, K)
    return np.sqrt(((points[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2).sum(axis=2))
