class KMeansError(Exception):
    """Base class for every error raised by parallel_kmeans."""


class DimensionMismatch(KMeansError, ValueError):
    pass


class InvalidClusterCount(KMeansError, ValueError):
    pass


class EmptyClusterError(KMeansError):
    def __init__(self, clusters, iteration):
        self.clusters = list(clusters)
        self.iteration = iteration
        super().__init__(f"Clusters {self.clusters} have no members at iteration {iteration}")


class FeatureTableError(KMeansError, ValueError):
    pass
