import pytest
from PIL import ImageFont

from abrprint.canvas import Canvas, Rect
from abrprint.config import BAR_COLORS, BKGD_COLOR, GRAPH_COLOR1, GRAPH_COLOR2
from abrprint.data import DataError, GraphBar, GraphData
from abrprint.render import format_value, print_bars, print_graph_frame, print_keys


@pytest.fixture
def font():
    return ImageFont.load_default()


@pytest.fixture
def canvas():
    c = Canvas(400, 300)
    c.fill(BKGD_COLOR)
    return c


def _graph(files=("a.tab", "b.tab"), w=200):
    data = GraphData(frame=Rect(75, 110, w, 100), files=list(files))
    data.range_min = 10.0
    data.range_max = 50.0
    return data


def test_format_value_truncates_to_two_decimals():
    assert format_value(12.345678) == "12.34"
    assert format_value(100.0) == "100.00"


def test_format_value_keeps_sign_and_two_decimals():
    text = format_value(-3.5)
    assert text.startswith("-3.")
    assert len(text.split(".")[1]) == 2


def test_graph_frame_sets_file_positions(canvas, font):
    data = _graph(files=("a.tab", "b.tab", "c.tab"))
    print_graph_frame(canvas, data, font)
    positions = data.file_positions
    assert len(positions) == 3
    assert positions[0] == data.frame.x + 20
    assert positions[2] - positions[1] == positions[1] - positions[0]


def test_graph_frame_draws_cap_and_boundary(canvas, font):
    data = _graph()
    print_graph_frame(canvas, data, font)
    frame = data.frame
    image = canvas.image
    assert image.getpixel((frame.x + frame.w // 4, frame.y)) == GRAPH_COLOR2.rgba
    assert image.getpixel((frame.x, frame.y + frame.h // 2)) == GRAPH_COLOR1.rgba
    assert image.getpixel((frame.x + frame.w // 2, frame.y + frame.h + 5)) == GRAPH_COLOR1.rgba


def test_graph_frame_draws_horizontal_divisions(canvas, font):
    data = _graph()
    print_graph_frame(canvas, data, font)
    frame = data.frame
    row = frame.h // data.vert_divisions
    assert canvas.image.getpixel((frame.x + frame.w // 4, frame.y + row)) == GRAPH_COLOR2.rgba


def test_graph_frame_without_files_raises(canvas, font):
    with pytest.raises(DataError):
        print_graph_frame(canvas, _graph(files=()), font)


def test_graph_frame_without_divisions_raises(canvas, font):
    data = _graph()
    data.vert_divisions = 0
    with pytest.raises(DataError):
        print_graph_frame(canvas, data, font)


def test_keys_draw_first_tile(canvas, font):
    data = _graph()
    print_keys(canvas, ["FILE", "NUM_FOUND", "card", "ncbi"], data, font)
    ypos = data.frame.y - 70
    assert canvas.image.getpixel((data.frame.x + 5, ypos + 2 + 5)) == BAR_COLORS[0].rgba


def test_keys_draw_every_database_colour(canvas, font):
    data = _graph(w=320)
    print_keys(canvas, ["FILE", "NUM_FOUND", "card", "ncbi"], data, font)
    ypos = data.frame.y - 70 + 7
    row = {canvas.image.getpixel((x, ypos)) for x in range(canvas.width)}
    assert BAR_COLORS[0].rgba in row
    assert BAR_COLORS[1].rgba in row


def test_keys_wrap_to_new_line(canvas, font):
    data = _graph(w=20)
    print_keys(canvas, ["FILE", "NUM_FOUND", "card", "ncbi"], data, font)
    ypos = data.frame.y - 70 + int(14 * 1.5)
    assert canvas.image.getpixel((data.frame.x + 5, ypos + 7)) == BAR_COLORS[1].rgba


def test_keys_without_databases_draw_nothing(canvas, font):
    before = canvas.image.tobytes()
    print_keys(canvas, ["FILE", "NUM_FOUND"], _graph(), font)
    assert canvas.image.tobytes() == before


def test_bars_are_filled_in_order(canvas):
    first = GraphBar("card", 20.0, Rect(100, 100, 40, 50), BAR_COLORS[0])
    second = GraphBar("ncbi", 30.0, Rect(120, 120, 40, 50), BAR_COLORS[1])
    print_bars(canvas, [first, second])
    image = canvas.image
    assert image.getpixel((105, 105)) == BAR_COLORS[0].rgba
    assert image.getpixel((130, 130)) == BAR_COLORS[1].rgba
    assert image.getpixel((155, 165)) == BAR_COLORS[1].rgba


def test_bars_with_values_add_text(font):
    bar = GraphBar("card", 42.5, Rect(50, 50, 120, 60), BAR_COLORS[2])
    plain = Canvas(300, 200)
    labelled = Canvas(300, 200)
    print_bars(plain, [bar])
    print_bars(labelled, [bar], font, True)
    assert plain.image.tobytes() != labelled.image.tobytes()
    assert labelled.image.getpixel((165, 105)) == BAR_COLORS[2].rgba


def test_bars_with_values_need_font(canvas):
    bar = GraphBar("card", 1.0, Rect(10, 10, 5, 5), BAR_COLORS[0])
    with pytest.raises(DataError):
        print_bars(canvas, [bar], None, True)