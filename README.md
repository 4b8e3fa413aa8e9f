# abrprint

`abrprint` reads the tab-separated summary tables that Abricate produces and
draws a bar graph for each one. Every file listed in the table gets a column
on the graph, and every database column gets its own coloured bar showing the
value of its first hit. The graphs are saved as PNG or JPEG images.

## Installing

```
pip install .
```

This installs the `abrprint` command. The only runtime dependency is Pillow.

Text on the graph is drawn with the TrueType font `Consolas.ttf`, looked up in
the configured typeface directory. If that file is not there, the command
prints an error and exits with status 1.

## Configuration

Settings live in `AbrPrint.cfg` in the working directory (a file at
`x64/Debug/AbrPrint.cfg` is used instead if only that one exists). If neither
is present, a default file is written the first time the program runs:

```
ABR_INPUT_DIR	./
ABR_TYPEFACE_DIR	./
ABR_TYPEFACE_NAME	Consolas
ABR_OUTPUT_DIR	./
ABR_OUTPUT_EXT	PNG
```

An unknown field name in the file is an error. The command-line flags below
change these values and save them at once, so a setting stays in place until
it is changed again.

## Usage

To graph one file from the configured source directory:

```
abrprint results.tab
```

To graph every file in the configured source directory:

```
abrprint
```

To graph a file given by its full path, leaving the configuration alone:

```
abrprint -i /data/abricate/results.tab
```

To graph every file in a subdirectory of the source directory:

```
abrprint more_results -b
```

To graph every file in a directory given by its full path, add `-b` to `-i`:

```
abrprint -i /data/abricate -b
```

In batch mode every entry of the directory is graphed, so it should hold
nothing but result tables.

A graph made from `results.tab` is saved as `results_bargraph.png`, or as
`results_bargraph.jpeg` when the output type is JPEG. It goes into the
configured output directory, which is created if it does not exist (its
parent must already exist). A file with the same name that is already there
is overwritten.

### Options

| Flag | Meaning |
| --- | --- |
| `-i`, `--raw-input PATH` | Full path of an input file or directory |
| `-b`, `--batch` | Graph every file in the source directory |
| `-d`, `--set-source-dir PATH` | Store the directory the input files are read from |
| `-o`, `--set-output-dir PATH` | Store the directory the graphs are saved to |
| `-t`, `--set-typeface-dir PATH` | Store the directory holding the font file |
| `-f`, `--set-font NAME` | Store a font name, without `.ttf` |
| `-e`, `--set-file-type TYPE` | Store the image type, `PNG` or `JPEG` (any case) |
| `-v`, `--verbose`, `--debug` | Write a debug log to the console |
| `-h`, `--help [FLAG]` | Show help, or detailed help for one flag |

Directories given to `-d` and `-o` get a trailing `/` if they lack one, and
backslashes in the paths given to `-d`, `-o` and `-t` become `/`.

If the only flags given are ones that change settings, the settings are saved
and no graphs are drawn. For example, to change the output type:

```
abrprint -e jpeg
```

For help on a single flag, the help flag must come first:

```
abrprint -h --batch
```

Errors in the options, the configuration or an input file are printed and
the command exits with status 1.

## Reading the graph

Each data column entry is read as a number; `.` means no hit, and an entry
with several hits separated by `;` counts only its first. The vertical range
runs from the smallest to the largest value, padded by a quarter of the
range (or by 5 when all values are equal), and capped at 100. Bars are drawn
tallest first so that short bars stay visible.

## What it does not do

- The `-f` setting is stored but not used when drawing: graphs always use
  `Consolas.ttf`.
- Graphs are only written to image files; nothing is shown on screen.
- Only the first hit of a multi-hit entry is graphed.

## Using it from Python

The parts of the program can also be used on their own:

- `abrprint.config`: `load_config`, `update_config`, `generate_config_file`,
  `find_config_file`, and the `Config` and `Color` classes.
- `abrprint.data`: reads a table (`make_labels`, `make_table`, `parse_hit`)
  and works out the bars (`get_data_range`, `generate_bars`,
  `focus_short_bars`) using `GraphData` and `GraphBar`.
- `abrprint.canvas`: `Canvas`, an in-memory RGBA image with `fill`,
  `draw_line`, `draw_polygon`, `fill_rect` and `print_text`, plus `load_font`.
- `abrprint.render`: `print_graph_frame`, `print_keys`, `print_bars` and
  `format_value` draw a graph onto a `Canvas`.
- `abrprint.files`: `gather_filenames`, `load_file`, `output_filename` and
  `save_graph_to_file`.
- `abrprint.cli`: `parse_args` returns an `Options` object, and `main` runs
  the whole command.