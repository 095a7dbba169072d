from . import config
from .assignment import assign_points, chunk_bounds
from .distance import distances_to_centroids, euclidean_distance
from .errors import DimensionMismatch, EmptyClusterError, FeatureTableError, InvalidClusterCount, KMeansError
from .kmeans import ClusteringRun, KMeansResult, RunStatus, inertia, run_kmeans
from .loader import load_feature_table
from .seeding import random_seeds, strided_seeds
from .update import group_members, update_centroids

__version__ = "0.1.0"
