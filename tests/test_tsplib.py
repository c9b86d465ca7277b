import pytest

from tourbench.tasks.tsp import InvalidInstance, parse_tsplib, read_tsplib

SQUARE = """NAME : square4
COMMENT : four corners
TYPE : TSP
DIMENSION : 4
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
1 0 0
2 0 10
3 10 10
4 10 0
EOF
"""


def test_parse_square():
    inst = parse_tsplib(SQUARE)
    assert inst.name == "square4"
    assert inst.n == 4
    assert list(inst.ids) == [1, 2, 3, 4]
    assert inst.distance(0, 2) == 14


def test_header_without_spaces_and_float_coords():
    text = "DIMENSION:2\nNODE_COORD_SECTION\n7 1.5e1 0\n9 0.0 0.0\n"
    inst = parse_tsplib(text)
    assert list(inst.ids) == [7, 9]
    assert inst.distance(0, 1) == 15


def test_read_from_file(tmp_path):
    path = tmp_path / "square4.tsp"
    path.write_text(SQUARE)
    inst = read_tsplib(path)
    assert inst.n == 4


@pytest.mark.parametrize("text,message", [
    ("NODE_COORD_SECTION\n1 0 0\n", "DIMENSION"),
    ("DIMENSION : 2\n1 0 0\n", "NODE_COORD_SECTION"),
    ("DIMENSION : x\nNODE_COORD_SECTION\n", "DIMENSION"),
    ("DIMENSION : 3\nNODE_COORD_SECTION\n1 0 0\n2 1 1\nEOF\n", "Expected 3"),
    ("DIMENSION : 2\nNODE_COORD_SECTION\n1 0 0\n2 a 1\n", "coordinates"),
    ("DIMENSION : 2\nNODE_COORD_SECTION\n1 0\n2 1 1\n", "coordinates"),
    ("DIMENSION : 2\nEDGE_WEIGHT_TYPE : GEO\nNODE_COORD_SECTION\n1 0 0\n2 1 1\n", "GEO"),
    ("DIMENSION : 0\nNODE_COORD_SECTION\n", "DIMENSION"),
])
def test_malformed(text, message):
    with pytest.raises(InvalidInstance, match=message):
        parse_tsplib(text)


def test_missing_file(tmp_path):
    with pytest.raises(InvalidInstance, match="Failed to open"):
        read_tsplib(tmp_path / "nope.tsp")
