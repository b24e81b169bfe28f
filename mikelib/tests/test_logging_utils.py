import csv

from mikelib.logging_utils import VecLogger
from mikelib.vec import Vec2, Vec3


def _rows(path):
    with path.open(newline="") as fh:
        return list(csv.reader(fh))


def test_header_and_vector_row(tmp_path):
    path = tmp_path / "logs" / "ops.csv"
    with VecLogger(path) as logger:
        logger.log("cross", Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(-3, 6, -3))

    header, row = _rows(path)
    assert header == [
        "operation",
        "a_x", "a_y", "a_z",
        "b_x", "b_y", "b_z",
        "t",
        "result_x", "result_y", "result_z",
        "scalar",
    ]
    assert row == ["cross", "1.0", "2.0", "3.0", "4.0", "5.0", "6.0", "", "-3.0", "6.0", "-3.0", ""]


def test_scalar_and_2d_rows(tmp_path):
    path = tmp_path / "ops.csv"
    logger = VecLogger(path)
    logger.log("dot", Vec2(1, 2), Vec2(3, 4), 11.0)
    logger.log("magnitude", Vec2(3, 4), None, 5.0)
    logger.log("lerp", Vec2(0, 0), Vec2(2, 2), Vec2(1, 1), t=0.5)
    logger.close()
    logger.close()

    _, dot, mag, lerp = _rows(path)
    assert dot == ["dot", "1.0", "2.0", "", "3.0", "4.0", "", "", "", "", "", "11.0"]
    assert mag == ["magnitude", "3.0", "4.0", "", "", "", "", "", "", "", "", "5.0"]
    assert lerp[7] == "0.5"
    assert lerp[8:11] == ["1.0", "1.0", ""]
