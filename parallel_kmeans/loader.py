import numpy as np
import pandas as pd

from .errors import FeatureTableError


def load_feature_table(path, delimiter=",", strip_columns=True):
    """Read a delimited file with a header line into an (N, D) float64 array.

    With ``strip_columns`` the first and last columns (row id and label in
    Iris-style files) are dropped and only the columns between them are kept
    as features.
    """
    try:
        df = pd.read_csv(path, sep=delimiter)
    except pd.errors.EmptyDataError as e:
        raise FeatureTableError(f"{path} is empty") from e
    except pd.errors.ParserError as e:
        raise FeatureTableError(f"{path} is not a well-formed delimited file: {e}") from e

    if strip_columns:
        if df.shape[1] < 3:
            raise FeatureTableError(f"{path} needs an id column, feature columns and a label column, got {df.shape[1]} columns")
        df = df.iloc[:, 1:-1]
    if df.empty:
        raise FeatureTableError(f"{path} has no data rows")

    try:
        df = df.apply(pd.to_numeric)
    except (ValueError, TypeError) as e:
        raise FeatureTableError(f"{path} has non-numeric feature values: {e}") from e
    if df.isna().any().any():
        bad_rows = df.index[df.isna().any(axis=1)].tolist()
        raise FeatureTableError(f"{path} has missing feature values in data rows {bad_rows[:10]}")

    return df.to_numpy(dtype=np.float64)
