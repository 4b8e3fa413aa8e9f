"""Command-line entry point: option handling and the graph-making run."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from abrprint.canvas import Canvas, CanvasError, Rect, load_font
from abrprint.config import (
    BKGD_COLOR,
    GRAPH_COLOR1,
    IMG_H,
    IMG_W,
    SUPPORTED_TYPES,
    ConfigError,
    load_config,
    update_config,
)
from abrprint.data import (
    DataError,
    GraphData,
    focus_short_bars,
    generate_bars,
    get_data_range,
    make_labels,
    make_table,
)
from abrprint.files import (
    FileControlError,
    NothingToDo,
    gather_filenames,
    load_file,
    save_graph_to_file,
)
from abrprint.helptext import help_text
from abrprint.render import print_bars, print_graph_frame, print_keys

HELP_FLAGS = ("-h", "--help")
FONT_NAME = "Consolas"
FONT_SIZE = 24


class UsageError(Exception):
    """Raised when the command-line options are given incorrectly."""


@dataclass
class Options:
    """What the command line asked for."""

    source: str = ""
    batch: bool = False
    raw: bool = False
    flags_used: bool = False
    debug: bool = False
    help: str | None = None


def _is_flag(arg: str) -> bool:
    return arg.startswith("-")


def _argument(argv: Sequence[str], index: int, message: str) -> str:
    """Return the argument following the flag at `index`, or raise."""
    if index + 1 >= len(argv) or _is_flag(argv[index + 1]):
        raise UsageError(message)
    return argv[index + 1]


def _as_directory(path: str, trailing_slash: bool) -> str:
    if trailing_slash and not path.endswith("/"):
        path += "/"
    return path.replace("\\", "/")


def _store(field: str, value: str, config_dir: str | Path, message: str) -> None:
    try:
        update_config(field, value, config_dir)
    except ConfigError as exc:
        raise UsageError(message) from exc


def _parse_help(argv: Sequence[str]) -> str | None:
    for index, arg in enumerate(argv):
        if arg not in HELP_FLAGS:
            continue
        if index != 0:
            raise UsageError(
                'Help flag provided incorrectly, please use "AbrPrint -h" '
                "for correct flag usage"
            )
        if len(argv) == 1:
            return help_text()
        if len(argv) == 2:
            return help_text(argv[1])
        raise UsageError(
            "Help flag provided too many arguments, please provide a single flag"
        )
    return None


def parse_args(argv: Sequence[str], config_dir: str | Path = ".") -> Options:
    """Interpret the command-line arguments (without the program name).

    Flags that change settings write them to the configuration file in
    `config_dir` straight away.
    """
    argv = list(argv)
    options = Options()

    page = _parse_help(argv)
    if page is not None:
        options.help = page
        return options

    for index, arg in enumerate(argv):
        if index == 0 and not _is_flag(arg):
            options.source = arg
            continue
        if not _is_flag(arg):
            continue

        if arg in ("-i", "--raw-input"):
            if options.source:
                raise UsageError("Two input files provided, one raw and one relative")
            options.source = _argument(
                argv, index, "Path argument required for flag -i/--raw-input"
            )
            options.raw = True

        elif arg in ("-b", "--batch"):
            if index + 1 < len(argv) and not _is_flag(argv[index + 1]):
                raise UsageError("Flag -b/--batch takes no arguments")
            options.batch = True
            options.flags_used = True

        elif arg in ("-d", "--set-source-dir"):
            value = _argument(
                argv, index, "Path argument required for flag -d/--set-source-dir"
            )
            _store(
                "ABR_INPUT_DIR",
                _as_directory(value, trailing_slash=True),
                config_dir,
                "Error updating source directory in configuration file",
            )
            options.flags_used = True

        elif arg in ("-t", "--set-typeface-dir"):
            value = _argument(
                argv, index, "Path argument required for flag -t/--set-typeface-dir"
            )
            _store(
                "ABR_TYPEFACE_DIR",
                _as_directory(value, trailing_slash=False),
                config_dir,
                "Error updating typeface directory in configuration file",
            )
            options.flags_used = True

        elif arg in ("-o", "--set-output-dir"):
            value = _argument(
                argv, index, "Path argument required for flag -o/--set-output-dir"
            )
            _store(
                "ABR_OUTPUT_DIR",
                _as_directory(value, trailing_slash=True),
                config_dir,
                "Error updating output directory in configuration file",
            )
            options.flags_used = True

        elif arg in ("-f", "--set-font"):
            value = _argument(
                argv, index, "Path argument required for flag -f/--set-font"
            )
            _store(
                "ABR_TYPEFACE_NAME",
                value,
                config_dir,
                "Error updating typeface name in configuration file",
            )
            options.flags_used = True

        elif arg in ("-e", "--set-file-type"):
            ext = _argument(
                argv,
                index,
                "File extension argument required for flag -e/--set-file-type",
            ).upper()
            if ext not in SUPPORTED_TYPES:
                raise UsageError(
                    "Unrecognized file extension provided for flag -e/--set-file-type"
                )
            _store(
                "ABR_OUTPUT_EXT",
                ext,
                config_dir,
                "Error updating file extension type in configuration file",
            )
            options.flags_used = True

        elif arg in ("-v", "--verbose", "--debug"):
            options.debug = True

    if options.batch and options.source:
        options.source += "/"
    return options


def _graph_file(config, directory: str, filename: str, font) -> None:
    config.log(f"Processing file {filename}")
    with load_file(directory, filename) as src:
        labels = make_labels(filename, src)
        table = make_table(filename, labels, src)

    canvas = Canvas(IMG_W, IMG_H)
    canvas.fill(BKGD_COLOR)
    canvas.print_text(filename, 75, 10, 24, 0, GRAPH_COLOR1, font)

    file_index = 0
    for index, label in enumerate(labels):
        if label == "FILE":
            file_index = index

    graph_data = GraphData(
        frame=Rect(75, 110, IMG_W - 125, IMG_H - 300),
        files=list(table[file_index]),
        vert_divisions=10,
    )
    get_data_range(table, graph_data)
    print_graph_frame(canvas, graph_data, font)

    bars = focus_short_bars(generate_bars(graph_data, labels, table))
    print_keys(canvas, labels, graph_data, font)
    print_bars(canvas, bars, font, False)

    save_graph_to_file(
        canvas.image, filename, config.output_ext, config.output_dir, "bargraph"
    )
    config.log("Graph saved to file\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run AbrPrint; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    config_dir = "."

    try:
        options = parse_args(argv, config_dir)
    except UsageError as exc:
        print(exc)
        return 1

    if options.help is not None:
        print(options.help, end="")
        return 0

    try:
        config = load_config(config_dir)
    except ConfigError as exc:
        print(exc)
        return 1
    config.debug = options.debug

    batch = options.batch
    if not options.source and not options.flags_used:
        batch = True

    config.log("Beginning to gather list of filenames")
    try:
        filenames, directory = gather_filenames(
            options.source, config, options.raw, batch, options.flags_used
        )
    except NothingToDo:
        return 0
    except FileControlError as exc:
        print(f"main(): {exc}")
        return 1
    for name in filenames:
        config.log(f"- {name}")

    try:
        font = load_font(config.typeface_dir, FONT_NAME, FONT_SIZE)
    except CanvasError as exc:
        print(exc)
        return 1

    for filename in filenames:
        try:
            _graph_file(config, directory, filename, font)
        except (DataError, CanvasError, FileControlError, ValueError, OSError) as exc:
            print(exc)
            return 1

    config.log("Making clean exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())