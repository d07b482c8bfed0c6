import pytest

from waverend.model import Face, Model, Vertex, format_model, format_stats, format_vertex


@pytest.fixture
def model():
    return Model(
        vertices=[Vertex(1, 2, 3), Vertex(4, 5, 6), Vertex(7, 8, 9)],
        faces=[Face((1, 2, 3))],
    )


def test_resolve_positive_counts_from_one(model):
    assert model.resolve(1) == Vertex(1, 2, 3)
    assert model.resolve(3) == Vertex(7, 8, 9)


def test_resolve_relative_index(model):
    assert model.resolve(-2) == model.vertices[-1]
    assert model.resolve(-4) == model.vertices[0]


@pytest.mark.parametrize("index", [0, -1, 4, -5])
def test_resolve_out_of_range(model, index):
    with pytest.raises(IndexError):
        model.resolve(index)


def test_face_vertices(model):
    assert model.face_vertices(Face((3, 1))) == [model.vertices[2], model.vertices[0]]
    assert model.face_vertices(Face()) == []


def test_format_vertex():
    assert format_vertex(Vertex(1, 2, 3)) == "x: 1.000000 y: 2.000000 z: 3.000000"


def test_format_stats(model):
    assert format_stats(model) == "Vertex Count: 3 Face Count: 1"
    assert format_stats(Model()) == "Vertex Count: 0 Face Count: 0"


def test_format_model_lists_everything(model):
    text = format_model(model)
    assert text.startswith("Vertex 0: " + format_vertex(model.vertices[0]))
    assert "Face 0: " in text
    assert text.count("idx: ") == 3
    assert "\n\tidx: 2" + format_vertex(model.vertices[1]) in text


def test_format_model_empty():
    assert format_model(Model()) == ""