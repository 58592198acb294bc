import pytest

from saltengine.quad import Quad


def _screen(vertex):
    return ((vertex.pos[0] + 1.0) / 2.0, (1.0 - vertex.pos[1]) / 2.0)


def test_new_quad_has_four_vertices():
    assert len(Quad().vertices) == 4


def test_display_rect_round_trip():
    q = Quad()
    q.set_display_rect(0.1, 0.2, 0.6, 0.9)
    corners = [_screen(v) for v in q.vertices]
    expected = [(0.6, 0.2), (0.6, 0.9), (0.1, 0.9), (0.1, 0.2)]
    for got, want in zip(corners, expected):
        assert got == pytest.approx(want)
    assert all(v.pos[2] == 0.0 for v in q.vertices)


def test_display_rect_full_screen_is_unit_square():
    q = Quad()
    q.set_display_rect(0.0, 0.0, 1.0, 1.0)
    assert q.vertices[0].pos[:2] == pytest.approx([1.0, 1.0])
    assert q.vertices[2].pos[:2] == pytest.approx([-1.0, -1.0])


def test_color_round_trip():
    q = Quad()
    q.set_color(255, 128, 7, 0)
    for v in q.vertices:
        assert [c * 256.0 for c in v.color_rgba] == pytest.approx([255, 128, 7, 0])


def test_texture_rect_flips_y():
    q = Quad()
    q.set_texture_rect(0.25, 0.5, 0.75, 1.0)
    assert q.vertices[0].texture_pos == pytest.approx([0.75, 1.0 - 0.5])
    assert q.vertices[1].texture_pos == pytest.approx([0.75, 1.0 - 1.0])
    assert q.vertices[2].texture_pos == pytest.approx([0.25, 1.0 - 1.0])
    assert q.vertices[3].texture_pos == pytest.approx([0.25, 1.0 - 0.5])


def test_texture_id_applies_to_all():
    q = Quad()
    q.set_texture_id(3)
    assert [v.texture_id for v in q.vertices] == [3.0] * 4


def test_vertices_are_independent():
    q = Quad()
    q.set_color(10, 10, 10, 10)
    q.vertices[0].color_rgba[0] = 99.0
    assert q.vertices[1].color_rgba[0] == pytest.approx(10 / 256.0)