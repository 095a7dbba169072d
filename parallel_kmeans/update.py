import logging

import numpy as np

from . import config
from .errors import EmptyClusterError

logger = logging.getLogger(__name__)


def group_members(assignment, k):
    """Point indices of each cluster, as a list indexed by cluster id."""
    return [np.flatnonzero(assignment == c) for c in range(k)]


def cluster_mean(data, indices):
    return data[indices].sum(axis=0) / len(indices)


def update_centroids(data, assignment, centroids, empty_policy=config.EMPTY_CLUSTER_POLICY, iteration=None):
    """Recompute every centroid as the mean of its members.

    Returns ``(new_centroids, empty)`` where ``empty`` lists the clusters that
    had no members. Their centroid is handled according to ``empty_policy``:
    ``"keep"`` leaves the previous value, ``"reseed"`` moves it onto the point
    farthest from its own centroid and ``"raise"`` raises EmptyClusterError.
    """
    if empty_policy not in config.EMPTY_CLUSTER_POLICIES:
        raise ValueError(f"Unknown empty cluster policy {empty_policy!r}")

    k = len(centroids)
    members = group_members(assignment, k)
    empty = [c for c in range(k) if len(members[c]) == 0]
    if empty and empty_policy == "raise":
        raise EmptyClusterError(empty, iteration)

    new_centroids = centroids.copy()
    for c in range(k):
        if len(members[c]):
            new_centroids[c] = cluster_mean(data, members[c])

    if empty:
        logger.warning("Iteration %s: clusters %s are empty (policy=%s)", iteration, empty, empty_policy)
        if empty_policy == "reseed":
            reseed_empty(data, assignment, new_centroids, members, empty)
    return new_centroids, empty


def reseed_empty(data, assignment, centroids, members, empty):
    """Move each empty centroid onto the worst-fitted point of a cluster that can spare one."""
    residual = np.sqrt(((data - centroids[assignment]) ** 2).sum(axis=1))
    sizes = [len(m) for m in members]
    # farthest first; stable sort keeps the lowest point index on ties
    order = iter(np.argsort(-residual, kind="stable"))
    for c in empty:
        for i in order:
            owner = assignment[i]
            if sizes[owner] > 1:
                sizes[owner] -= 1
                centroids[c] = data[i]
                break
        else:
            # no donor left, the centroid keeps its previous value
            return
