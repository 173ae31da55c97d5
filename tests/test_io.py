import os

import pandas as pd
import pytest

from utils.io import LoadError, TSPLoader


def write(tmp_path, text, name="problem.tsp"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


HEADER = "NAME : tiny\nTYPE : TSP\nDIMENSION : 3\nEDGE_WEIGHT_TYPE : EUC_2D\nNODE_COORD_SECTION\n"


def test_load_square(data_dir):
    problem = TSPLoader.load_from_file(os.path.join(data_dir, "square4.tsp"))
    assert problem.n == 4
    assert problem.name == "square4"
    assert problem.ids == [1, 2, 3, 4]
    assert problem.coords.tolist() == [[0, 0], [0, 10], [10, 10], [10, 0]]
    assert problem.edge_weight_type == "EUC_2D"


def test_header_without_spaces_and_eof(tmp_path):
    path = write(tmp_path, "NAME: tiny\nDIMENSION: 3\nNODE_COORD_SECTION\n1 0 0\n2 3 4\n\n3 6.5 8e0\nEOF\n")
    problem = TSPLoader.load_from_file(path)
    assert problem.n == 3
    assert problem.coords[2].tolist() == [6.5, 8.0]
    assert problem.distance(0, 1) == 5.0


def test_ceil_2d(tmp_path):
    path = write(tmp_path, "DIMENSION : 2\nEDGE_WEIGHT_TYPE : CEIL_2D\nNODE_COORD_SECTION\n1 0 0\n2 1 1\n")
    assert TSPLoader.load_from_file(path).distance(0, 1) == 2.0


@pytest.mark.parametrize("text", [
    "NAME : tiny\nNODE_COORD_SECTION\n1 0 0\n",
    "NODE_COORD_SECTION\n1 0 0\nDIMENSION : 1\n",
    "DIMENSION : 0\nNODE_COORD_SECTION\n",
    "DIMENSION : -2\nNODE_COORD_SECTION\n1 0 0\n",
    "DIMENSION : three\nNODE_COORD_SECTION\n1 0 0\n",
    "DIMENSION : 1\n1 0 0\n",
    HEADER + "1 0 0\n2 1 1\n",
    HEADER + "1 0 0\n2 1 1\nEOF\n",
    HEADER + "1 0 0\n2 1 x\n3 2 2\n",
    HEADER + "1 0 0\n2 1\n3 2 2\n",
    HEADER + "1 0 0\n2.5 1 1\n3 2 2\n",
    HEADER + "1 0 0\n2 nan 1\n3 2 2\n",
    "DIMENSION : 1\nEDGE_WEIGHT_TYPE : GEO\nNODE_COORD_SECTION\n1 0 0\n",
    "DIMENSION : 2\nNODE_COORD_SECTION\n1 0 0\n2 3 4\n3 6 8\n",
    "DIMENSION : 2\nNODE_COORD_SECTION\n1 0 0\n2 3 4\n\nDISPLAY_DATA_SECTION\n",
])
def test_malformed_files(tmp_path, text):
    with pytest.raises(LoadError):
        TSPLoader.load_from_file(write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(LoadError):
        TSPLoader.load_from_file(str(tmp_path / "missing.tsp"))


def test_load_error_is_a_value_error():
    assert issubclass(LoadError, ValueError)


def test_populate_database(data_dir):
    db = pd.DataFrame(columns=['problem_name', 'comment', 'type', 'dimension', 'edge_weight_type'])
    TSPLoader.load_from_file(os.path.join(data_dir, "square4.tsp"), populate=True, db=db)
    assert len(db) == 1
    assert db.loc[0, 'problem_name'] == "square4"
    assert db.loc[0, 'dimension'] == 4

    with pytest.raises(ValueError):
        TSPLoader.load_from_file(os.path.join(data_dir, "square4.tsp"), populate=True)


def test_load_multiple_skips_broken_files(tmp_path, data_dir, capsys):
    broken = write(tmp_path, "DIMENSION : 2\nNODE_COORD_SECTION\n1 0 0\n")
    problems = TSPLoader.load_multiple([os.path.join(data_dir, "square4.tsp"), broken])
    assert [problem.name for problem in problems] == ["square4"]
    out = capsys.readouterr().out
    assert "Failed to load" in out


def test_load_from_directory(data_dir):
    problems = TSPLoader.load_from_directory(data_dir)
    assert sorted(problem.name for problem in problems) == ["crossed8", "square4"]


def test_trailing_blank_lines_after_last_record(tmp_path):
    path = write(tmp_path, "DIMENSION : 2\nNODE_COORD_SECTION\n1 0 0\n2 3 4\n\n\n")
    assert TSPLoader.load_from_file(path).n == 2
