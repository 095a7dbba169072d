import numpy as np

from . import config
from .distance import distances_to_centroids


def chunk_bounds(n_points, n_chunks=None, chunk_size=None):
    """Split [0, n_points) into contiguous, non-overlapping (start, end) ranges.

    With ``chunk_size`` every range has that length except possibly the last.
    Otherwise the points are spread row-wise over ``n_chunks`` ranges, the
    first ``n_points % n_chunks`` ranges taking one extra point.
    """
    if n_points <= 0:
        return []
    if chunk_size is not None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        return [(start, min(start + chunk_size, n_points)) for start in range(0, n_points, chunk_size)]

    if n_chunks is None:
        n_chunks = config.NUM_THREADS * config.CHUNKS_PER_THREAD
    n_chunks = max(1, min(n_chunks, n_points))
    rows_per_chunk = n_points // n_chunks
    remainder = n_points % n_chunks
    counts = [rows_per_chunk + (1 if i < remainder else 0) for i in range(n_chunks)]
    displacements = [sum(counts[:i]) for i in range(n_chunks)]
    return [(start, start + count) for start, count in zip(displacements, counts)]


def assign_chunk(data, centroids, assignment, start, end):
    """Assign points [start, end) to their nearest centroid, writing only that slice.

    Returns True when any point in the slice moved to a different cluster.
    """
    distances = distances_to_centroids(data[start:end], centroids)
    # argmin returns the first minimum, so the lowest cluster index wins ties
    nearest = np.argmin(distances, axis=1)
    changed = bool(np.any(nearest != assignment[start:end]))
    assignment[start:end] = nearest
    return changed


def assign_points(data, centroids, assignment, executor=None, chunk_size=None, n_chunks=None):
    """Run one assignment pass over every point, updating ``assignment`` in place.

    Chunks are submitted to ``executor`` when one is given and run inline
    otherwise. The call returns only after every chunk has finished, and the
    returned flag is True when at least one point changed cluster.
    """
    bounds = chunk_bounds(len(data), n_chunks=n_chunks, chunk_size=chunk_size)
    if executor is None:
        flags = [assign_chunk(data, centroids, assignment, start, end) for start, end in bounds]
    else:
        futures = [executor.submit(assign_chunk, data, centroids, assignment, start, end) for start, end in bounds]
        flags = [future.result() for future in futures]
    return any(flags)
