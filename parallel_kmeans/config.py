import os

# Configuration
NUM_THREADS = int(os.environ.get("KMEANS_NUM_THREADS", "4"))
CHUNKS_PER_THREAD = int(os.environ.get("KMEANS_CHUNKS_PER_THREAD", "4"))
MAX_ITER = int(os.environ.get("KMEANS_MAX_ITER", "10000"))
SEED_STRIDE = int(os.environ.get("KMEANS_SEED_STRIDE", "100"))

# Sentinel for points that have not been through an assignment pass yet
UNASSIGNED = -1

EMPTY_CLUSTER_POLICIES = ("keep", "reseed", "raise")
EMPTY_CLUSTER_POLICY = "keep"
