import enum
import logging
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from . import config
from .assignment import assign_points
from .errors import DimensionMismatch, InvalidClusterCount
from .update import update_centroids

logger = logging.getLogger(__name__)


class RunStatus(enum.Enum):
    RUNNING = "running"
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "max_iterations_reached"


def as_float_table(values, what):
    """Convert ``values`` to float64, telling ragged rows apart from non-numeric cells."""
    try:
        return np.array(values, dtype=np.float64)
    except ValueError as e:
        try:
            lengths = {len(row) for row in values}
        except TypeError:
            lengths = set()
        if len(lengths) > 1:
            raise DimensionMismatch(f"{what} do not share a single dimension: row lengths {sorted(lengths)}") from e
        raise ValueError(f"{what} must be numeric: {e}") from e


def as_dataset(data):
    """Copy ``data`` into a read-only (N, D) float64 array."""
    data = as_float_table(data, "Points")
    if data.ndim != 2 or data.shape[1] == 0:
        raise DimensionMismatch(f"Expected an (N, D) table of points, got shape {data.shape}")
    data.setflags(write=False)
    return data


def check_centroids(data, centroids):
    centroids = as_float_table(centroids, "Centroids")
    if centroids.ndim >= 1 and len(centroids) == 0:
        raise InvalidClusterCount(f"Number of clusters must be in [1, {data.shape[0]}], got 0")
    if centroids.ndim != 2:
        raise DimensionMismatch(f"Expected a (K, D) table of centroids, got shape {centroids.shape}")
    k = centroids.shape[0]
    if k > data.shape[0]:
        raise InvalidClusterCount(f"Number of clusters must be in [1, {data.shape[0]}], got {k}")
    if centroids.shape[1] != data.shape[1]:
        raise DimensionMismatch(f"Centroids have dimension {centroids.shape[1]}, points have dimension {data.shape[1]}")
    return centroids


def inertia(data, centroids, assignment):
    """Sum of squared distances from each point to its assigned centroid."""
    return float(((data - centroids[assignment]) ** 2).sum())


class KMeansResult:
    def __init__(self, assignment, centroids, iterations, status, elapsed, inertia_history, empty_clusters):
        self.assignment = assignment
        self.centroids = centroids
        self.iterations = iterations
        self.status = status
        self.elapsed = elapsed
        self.inertia_history = inertia_history
        self.empty_clusters = empty_clusters

    @property
    def converged(self):
        return self.status is RunStatus.CONVERGED

    @property
    def inertia(self):
        return self.inertia_history[-1] if self.inertia_history else None

    def cluster_sizes(self):
        return np.bincount(self.assignment, minlength=len(self.centroids))

    def __repr__(self):
        return (f"KMeansResult(k={len(self.centroids)}, status={self.status.value}, "
                f"iterations={self.iterations}, elapsed={self.elapsed:.4f}s)")


class ClusteringRun:
    """State of one Lloyd's clustering run: dataset, centroids, assignment and loop status.

    Each run owns its arrays, so several runs can execute side by side.
    """

    def __init__(self, data, centroids, max_iter=None, n_threads=None, chunk_size=None,
                 empty_policy=config.EMPTY_CLUSTER_POLICY):
        if empty_policy not in config.EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"Unknown empty cluster policy {empty_policy!r}")
        self.max_iter = config.MAX_ITER if max_iter is None else max_iter
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")
        self.n_threads = config.NUM_THREADS if n_threads is None else n_threads
        if self.n_threads < 1:
            raise ValueError(f"n_threads must be at least 1, got {self.n_threads}")
        if chunk_size is not None and chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self.chunk_size = chunk_size
        self.empty_policy = empty_policy

        self.data = as_dataset(data)
        self.centroids = check_centroids(self.data, centroids)
        self.assignment = np.full(len(self.data), config.UNASSIGNED, dtype=np.intp)
        self.iteration = 1
        self.status = RunStatus.RUNNING
        self.inertia_history = []
        self.empty_clusters = []

    @property
    def k(self):
        return len(self.centroids)

    def assign(self, executor=None):
        n_chunks = self.n_threads * config.CHUNKS_PER_THREAD
        changed = assign_points(self.data, self.centroids, self.assignment, executor=executor,
                                chunk_size=self.chunk_size, n_chunks=n_chunks)
        self.inertia_history.append(inertia(self.data, self.centroids, self.assignment))
        return changed

    def update(self):
        self.centroids, empty = update_centroids(self.data, self.assignment, self.centroids,
                                                 empty_policy=self.empty_policy, iteration=self.iteration)
        if empty:
            self.empty_clusters.append((self.iteration, empty))

    def step(self, executor=None):
        """Advance the loop by one iteration and return the resulting status."""
        if self.status is not RunStatus.RUNNING:
            return self.status
        logger.debug("Iteration %d", self.iteration)

        if not self.assign(executor):
            self.status = RunStatus.CONVERGED
            return self.status

        self.update()
        self.iteration += 1
        if self.iteration > self.max_iter:
            # the counter has moved past the cap, report the passes actually made
            self.iteration = self.max_iter
            self.status = RunStatus.MAX_ITERATIONS_REACHED
        return self.status

    def run(self):
        start_time = time.time()
        with ThreadPoolExecutor(max_workers=self.n_threads) as executor:
            while self.step(executor) is RunStatus.RUNNING:
                pass
        elapsed = time.time() - start_time

        logger.info("K-means with k=%d finished: %s after %d iterations in %.4f seconds",
                    self.k, self.status.value, self.iteration, elapsed)
        return KMeansResult(
            assignment=self.assignment.copy(),
            centroids=self.centroids.copy(),
            iterations=self.iteration,
            status=self.status,
            elapsed=elapsed,
            inertia_history=list(self.inertia_history),
            empty_clusters=list(self.empty_clusters),
        )


def run_kmeans(data, centroids, max_iter=None, n_threads=None, chunk_size=None,
               empty_policy=config.EMPTY_CLUSTER_POLICY):
    """Cluster ``data`` with Lloyd's algorithm starting from ``centroids``.

    Raises DimensionMismatch or InvalidClusterCount before any work is done
    when the inputs are inconsistent, and ValueError for non-numeric input or
    out-of-range settings.
    """
    run = ClusteringRun(data, centroids, max_iter=max_iter, n_threads=n_threads,
                        chunk_size=chunk_size, empty_policy=empty_policy)
    return run.run()
