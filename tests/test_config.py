import pytest

from abrprint.config import (
    BAR_COLORS,
    Color,
    Config,
    ConfigError,
    find_config_file,
    generate_config_file,
    load_config,
    update_config,
)


def test_find_config_file_none_when_missing(tmp_path):
    assert find_config_file(tmp_path) is None


def test_generate_then_load_gives_defaults(tmp_path):
    path = generate_config_file(tmp_path / "AbrPrint.cfg")
    assert path.is_file()
    assert load_config(tmp_path) == Config()


def test_generated_file_contents(tmp_path):
    path = generate_config_file(tmp_path / "AbrPrint.cfg")
    lines = path.read_text().splitlines()
    assert lines[0] == "ABR_INPUT_DIR\t./"
    assert lines[2] == "ABR_TYPEFACE_NAME\tConsolas"
    assert lines[4] == "ABR_OUTPUT_EXT\tPNG"


def test_load_creates_missing_file(tmp_path):
    config = load_config(tmp_path)
    assert config.typeface_name == "Consolas"
    assert find_config_file(tmp_path) == tmp_path / "AbrPrint.cfg"


def test_find_prefers_main_location(tmp_path):
    debug_dir = tmp_path / "x64" / "Debug"
    debug_dir.mkdir(parents=True)
    generate_config_file(debug_dir / "AbrPrint.cfg")
    assert find_config_file(tmp_path) == debug_dir / "AbrPrint.cfg"
    generate_config_file(tmp_path / "AbrPrint.cfg")
    assert find_config_file(tmp_path) == tmp_path / "AbrPrint.cfg"


def test_update_round_trip(tmp_path):
    update_config("ABR_OUTPUT_EXT", "JPEG", tmp_path)
    update_config("ABR_INPUT_DIR", "data/in/", tmp_path)
    config = load_config(tmp_path)
    assert config.output_ext == "JPEG"
    assert config.input_dir == "data/in/"
    assert config.output_dir == Config().output_dir


def test_update_writes_debug_location(tmp_path):
    debug_dir = tmp_path / "x64" / "Debug"
    debug_dir.mkdir(parents=True)
    generate_config_file(debug_dir / "AbrPrint.cfg")
    path = update_config("ABR_TYPEFACE_NAME", "Mono", tmp_path)
    assert path == debug_dir / "AbrPrint.cfg"
    assert load_config(tmp_path).typeface_name == "Mono"
    assert not (tmp_path / "AbrPrint.cfg").exists()


def test_update_keeps_other_fields(tmp_path):
    update_config("ABR_TYPEFACE_DIR", "fonts/", tmp_path)
    before = load_config(tmp_path)
    update_config("ABR_OUTPUT_DIR", "out/", tmp_path)
    after = load_config(tmp_path)
    assert after.typeface_dir == before.typeface_dir
    assert after.output_dir == "out/"


def test_unknown_field_raises(tmp_path):
    (tmp_path / "AbrPrint.cfg").write_text("ABR_BOGUS\tvalue\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_color_tuples():
    color = Color(1, 2, 3)
    assert color.rgba == (1, 2, 3, 255)
    assert color.rgb == (1, 2, 3)


def test_bar_colors_opaque():
    assert len(BAR_COLORS) == 24
    assert all(c.a == 255 for c in BAR_COLORS)
    assert BAR_COLORS[0] == Color(210, 70, 70, 255)


def test_log_only_in_debug(capsys):
    Config().log("hidden")
    Config(debug=True).log("shown")
    assert capsys.readouterr().out == "shown\n"