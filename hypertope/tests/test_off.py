"""Tests for OFF output."""
import pytest

from hypertope._builders import (dyad, nullitope, point, regular_polygon,
                                 symmetric_polygon, wythoff)
from hypertope._off import element_name, save_off, to_off
from hypertope._polytope import PolytopeC


def lines(text):
    return text.splitlines()


class TestHeaders:
    """Tests for the OFF header and element counts line."""

    def test_point(self):
        assert to_off(point()) == "0OFF\n"

    def test_dyad(self):
        out = lines(to_off(dyad()))
        assert out[0] == "1OFF"
        assert out[1] == "2"
        assert out[2:] == ["-0.5", "0.5"]

    def test_polygon(self):
        out = lines(to_off(regular_polygon(4)))
        assert out[0] == "2OFF"
        assert out[1] == "4 1"
        assert len(out) == 2 + 4 + 1
        assert out[-1] == "4 0 1 2 3"

    def test_cube(self):
        out = lines(to_off(wythoff([4, 3])))
        assert out[0] == "OFF"
        assert out[1] == "8 6 12"
        faces = out[2 + 8:]
        assert len(faces) == 6
        assert all(f.split()[0] == "4" for f in faces)

    def test_tesseract(self):
        out = lines(to_off(wythoff([4, 3, 3])))
        assert out[0] == "4OFF"
        assert out[1] == "16 24 32 8"
        # vertices, squares, then cubes listed by their faces
        cells = out[2 + 16 + 24:]
        assert len(cells) == 8
        assert all(c.split()[0] == "6" for c in cells)

    def test_symmetric_polytope_is_converted(self):
        out = lines(to_off(symmetric_polygon(5)))
        assert out[:2] == ["2OFF", "5 1"]


class TestComments:
    def test_polygon_comments(self):
        text = to_off(regular_polygon(3), comments=True)
        assert "# Vertices, Components" in text
        assert "# Components" in text

    def test_polychoron_comments(self):
        text = to_off(wythoff([3, 3, 3]), comments=True)
        assert "# Vertices, Faces, Edges, Cells" in text
        assert "\n# Cells\n" in text

    def test_element_names(self):
        assert element_name(3) == "Cells"
        assert element_name(12) == "12-elements"


class TestErrors:
    def test_nullitope(self):
        with pytest.raises(ValueError):
            to_off(nullitope())

    def test_space_larger_than_rank(self):
        P = regular_polygon(4)
        P.set_space_dimensions(3)
        with pytest.raises(ValueError):
            to_off(P)


class TestPadding:
    def test_missing_coordinates_are_zero(self):
        """A polygon drawn on a line gets a zero second coordinate."""
        P = PolytopeC([
            [(0.0,), (1.0,), (2.0,)],
            [[0, 1], [1, 2], [2, 0]],
            [[0, 1, 2]],
        ])
        out = lines(to_off(P))
        assert out[2:5] == ["0.0 0", "1.0 0", "2.0 0"]


class TestSave:
    def test_save_off(self, tmp_path):
        fn = tmp_path / "square.off"
        save_off(regular_polygon(4), fn)
        assert fn.read_text() == to_off(regular_polygon(4))
