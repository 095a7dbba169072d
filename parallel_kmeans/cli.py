import argparse
import logging
import sys

import numpy as np

from . import config
from .errors import KMeansError
from .kmeans import run_kmeans
from .loader import load_feature_table
from .seeding import random_seeds, strided_seeds


def build_parser():
    parser = argparse.ArgumentParser(prog="parallel-kmeans", description="Cluster a CSV file with parallel K-means")
    parser.add_argument("path", help="delimited file with a header line")
    parser.add_argument("k", nargs="?", type=int, help="number of clusters (prompted for when omitted)")
    parser.add_argument("--delimiter", default=",")
    parser.add_argument("--keep-columns", action="store_true",
                        help="use every column as a feature instead of dropping the first and last")
    parser.add_argument("--threads", type=int, default=config.NUM_THREADS)
    parser.add_argument("--max-iter", type=int, default=config.MAX_ITER)
    parser.add_argument("--chunk-size", type=int, default=None)
    parser.add_argument("--empty", choices=config.EMPTY_CLUSTER_POLICIES, default=config.EMPTY_CLUSTER_POLICY)
    parser.add_argument("--seeding", choices=("strided", "random"), default="strided")
    parser.add_argument("--stride", type=int, default=config.SEED_STRIDE)
    parser.add_argument("--seed", type=int, default=None, help="random generator seed for --seeding random")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def prompt_k(stdin=None):
    stdin = stdin or sys.stdin
    print("Enter the number of clusters:\t", end="", flush=True)
    line = stdin.readline()
    try:
        return int(line.strip())
    except ValueError:
        raise KMeansError(f"Number of clusters must be an integer, got {line.strip()!r}") from None


def main(argv=None, stdin=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        data = load_feature_table(args.path, delimiter=args.delimiter, strip_columns=not args.keep_columns)
        k = args.k if args.k is not None else prompt_k(stdin)
        if args.seeding == "random":
            centroids = random_seeds(data, k, seed=args.seed)
        else:
            centroids = strided_seeds(data, k, stride=args.stride)
        result = run_kmeans(data, centroids, max_iter=args.max_iter, n_threads=args.threads,
                            chunk_size=args.chunk_size, empty_policy=args.empty)
    except (KMeansError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    with np.printoptions(precision=4, suppress=True):
        print(f"Result: {result.status.value} after {result.iterations} iterations")
        print(f"Cluster sizes: {result.cluster_sizes().tolist()}")
        print(f"Centroids:\n{result.centroids}")
    print(f"\nTime required for {k} clusters is {result.elapsed} seconds")
    return 0
