import numpy as np
import pytest

from parallel_kmeans import FeatureTableError, load_feature_table

IRIS_HEAD = """Id,SepalLengthCm,SepalWidthCm,PetalLengthCm,PetalWidthCm,Species
1,5.1,3.5,1.4,0.2,Iris-setosa
2,4.9,3.0,1.4,0.2,Iris-setosa
51,7.0,3.2,4.7,1.4,Iris-versicolor
101,6.3,3.3,6.0,2.5,Iris-virginica
"""


@pytest.fixture
def write_csv(tmp_path):
    def write(text, name="data.csv"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return write


def test_strips_id_and_label(write_csv):
    data = load_feature_table(write_csv(IRIS_HEAD))

    assert data.dtype == np.float64
    assert data.shape == (4, 4)
    np.testing.assert_array_equal(data[0], [5.1, 3.5, 1.4, 0.2])
    np.testing.assert_array_equal(data[3], [6.3, 3.3, 6.0, 2.5])


def test_keep_all_columns(write_csv):
    data = load_feature_table(write_csv("x;y\n1;2\n3;4.5\n"), delimiter=";", strip_columns=False)

    assert data.tolist() == [[1.0, 2.0], [3.0, 4.5]]


def test_empty_file(write_csv):
    with pytest.raises(FeatureTableError):
        load_feature_table(write_csv(""))


def test_header_only(write_csv):
    with pytest.raises(FeatureTableError, match="no data rows"):
        load_feature_table(write_csv("Id,a,b,Species\n"))


def test_non_numeric_feature(write_csv):
    with pytest.raises(FeatureTableError, match="non-numeric"):
        load_feature_table(write_csv("Id,a,b,Species\n1,0.5,abc,x\n"))


def test_missing_feature(write_csv):
    with pytest.raises(FeatureTableError, match="missing"):
        load_feature_table(write_csv("Id,a,b,Species\n1,0.5,1.5,x\n2,,1.0,y\n"))


def test_too_few_columns(write_csv):
    with pytest.raises(FeatureTableError):
        load_feature_table(write_csv("a,b\n1,2\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_feature_table(tmp_path / "nope.csv")
