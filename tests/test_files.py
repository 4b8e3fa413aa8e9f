import pytest
from PIL import Image

from abrprint.config import Config
from abrprint.files import (
    FileControlError,
    NothingToDo,
    gather_filenames,
    load_file,
    output_filename,
    save_graph_to_file,
)


def test_load_file_reads_content(tmp_path):
    (tmp_path / "a.tab").write_text("#FILE\tX\n")
    with load_file(str(tmp_path) + "/", "a.tab") as stream:
        assert stream.read() == "#FILE\tX\n"


def test_load_file_missing_raises(tmp_path):
    with pytest.raises(FileControlError):
        load_file(str(tmp_path) + "/", "missing.tab")


def test_raw_single_file_splits_path(tmp_path):
    loc = f"{tmp_path}/data/x.tab"
    names, directory = gather_filenames(loc, Config(), raw=True)
    assert names == ["x.tab"]
    assert directory == f"{tmp_path}/data/"


def test_raw_single_file_without_slash():
    names, directory = gather_filenames("x.tab", Config(), raw=True)
    assert names == ["x.tab"]
    assert directory == ""


def test_raw_batch_lists_directory(tmp_path):
    for name in ("b.tab", "a.tab"):
        (tmp_path / name).write_text("")
    loc = str(tmp_path) + "/"
    names, directory = gather_filenames(loc, Config(), raw=True, batch=True)
    assert names == ["a.tab", "b.tab"]
    assert directory == loc


def test_batch_uses_input_dir(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "r.tab").write_text("")
    config = Config(input_dir=str(tmp_path) + "/")
    names, directory = gather_filenames("sub/", config, batch=True)
    assert names == ["r.tab"]
    assert directory == str(tmp_path) + "/sub/"


def test_single_file_relative_to_input_dir():
    config = Config(input_dir="results/")
    names, directory = gather_filenames("run/a.tab", config)
    assert names == ["a.tab"]
    assert directory == "results/run/"


def test_only_flags_means_nothing_to_do():
    with pytest.raises(NothingToDo):
        gather_filenames("", Config(), flags_used=True)


def test_missing_batch_directory_raises(tmp_path):
    with pytest.raises(FileControlError):
        gather_filenames(str(tmp_path / "nope"), Config(), raw=True, batch=True)


def test_output_filename_documented_example():
    assert output_filename("test123.tab", "bargraph", "PNG") == "test123_bargraph.png"


def test_output_filename_trims_at_first_dot():
    name = output_filename("sample.v2.tab", "bargraph", "JPEG")
    assert name.startswith("sample_bargraph.")
    assert name.endswith(".jpeg")


@pytest.mark.parametrize("file_type", ["PNG", "JPEG"])
def test_save_creates_directory_and_image(tmp_path, file_type):
    image = Image.new("RGBA", (30, 20), (10, 20, 30, 255))
    out_dir = str(tmp_path / "out") + "/"
    path = save_graph_to_file(image, "s.tab", file_type, out_dir, "bargraph")
    assert path.is_file()
    assert path.name == output_filename("s.tab", "bargraph", file_type)
    with Image.open(path) as saved:
        assert saved.size == (30, 20)
        assert saved.format == file_type


def test_save_rejects_unknown_type(tmp_path):
    image = Image.new("RGBA", (4, 4))
    with pytest.raises(FileControlError):
        save_graph_to_file(image, "s.tab", "GIF", str(tmp_path) + "/", "bargraph")