import pytest

from waverend.model import Face, Model, Vertex
from waverend.raster import DEFAULT_LIGHT, Canvas
from waverend.view import ViewState, render_model


def test_default_projection():
    view = ViewState()
    assert view.project(Vertex(0.5, 0.25, 0.9), 640, 480) == pytest.approx((160.0, 180.0))


def test_origin_projects_to_centre():
    for rotate in ("rotate_right", "rotate_down", "rotate_left", "rotate_up"):
        view = ViewState()
        getattr(view, rotate)()
        assert view.project(Vertex(0, 0, 0), 640, 480) == (320.0, 240.0)


@pytest.mark.parametrize("rotate", ["rotate_right", "rotate_left", "rotate_down", "rotate_up"])
def test_four_turns_restore(rotate):
    view = ViewState()
    for _ in range(4):
        getattr(view, rotate)()
    assert view.xz_state == ViewState().xz_state
    assert view.yz_state == ViewState().yz_state
    assert view.horiz_axis & 0x7 == ViewState().horiz_axis
    assert view.vert_axis & 0x7 == ViewState().vert_axis


@pytest.mark.parametrize(
    "there, back", [("rotate_right", "rotate_left"), ("rotate_down", "rotate_up")]
)
def test_turn_and_back(there, back):
    view = ViewState()
    getattr(view, there)()
    assert view != ViewState()
    getattr(view, back)()
    assert view == ViewState()


def test_right_turn_shows_depth_axis():
    view = ViewState()
    view.rotate_right()
    x, y = view.project(Vertex(0, 0, 0.5), 640, 480)
    assert x != 320.0
    assert y == 240.0


def _single(vertices):
    return Model(vertices=vertices, faces=[Face((1, 2, 3))])


def test_render_draws_lit_face():
    model = _single([Vertex(0, 0, 0), Vertex(0.5, 0, 0), Vertex(0, 0.5, 0)])
    canvas = Canvas(40, 40)
    assert render_model(model, ViewState(), canvas, DEFAULT_LIGHT) == 1
    assert max(canvas.pixels) == 255


def test_render_skips_face_turned_away():
    model = _single([Vertex(0, 0, 0), Vertex(0, 0.5, 0), Vertex(0.5, 0, 0)])
    canvas = Canvas(40, 40)
    canvas.clear(9)
    assert render_model(model, ViewState(), canvas, DEFAULT_LIGHT) == 0
    assert not any(canvas.pixels)


def test_render_skips_short_faces():
    model = Model(vertices=[Vertex(0, 0, 0), Vertex(1, 0, 0)], faces=[Face((1, 2))])
    canvas = Canvas(10, 10)
    assert render_model(model, ViewState(), canvas, DEFAULT_LIGHT) == 0


def test_render_bad_index_raises():
    model = Model(vertices=[Vertex(0, 0, 0)], faces=[Face((1, 2, 3))])
    with pytest.raises(IndexError):
        render_model(model, ViewState(), Canvas(10, 10), DEFAULT_LIGHT)