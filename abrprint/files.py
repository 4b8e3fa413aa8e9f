"""Locating input files, opening them and saving finished graphs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO

from PIL import Image

from abrprint.config import Config


class FileControlError(Exception):
    """Raised when an input file or output location cannot be used."""


class NothingToDo(Exception):
    """Raised when only configuration flags were given and no graph is wanted."""


def load_file(directory: str, filename: str) -> TextIO:
    """Open `directory + filename` for reading as text."""
    full_path = directory + filename
    try:
        return open(full_path, encoding="utf-8")
    except OSError as exc:
        raise FileControlError(f"Error opening file {full_path}") from exc


def _split_path(path: str) -> tuple[str, str]:
    """Split a path at its last '/' into (directory with slash, name)."""
    cut = path.rfind("/")
    return path[: cut + 1], path[cut + 1 :]


def _list_directory(path: str) -> list[str]:
    try:
        with os.scandir(path) as entries:
            return sorted(entry.name for entry in entries)
    except OSError as exc:
        raise FileControlError(f"Error reading directory {path}") from exc


def gather_filenames(
    loc: str,
    config: Config,
    raw: bool = False,
    batch: bool = False,
    flags_used: bool = False,
) -> tuple[list[str], str]:
    """Return the names of the files to graph and the directory holding them.

    A raw location is used as given; otherwise it is taken relative to the
    configured input directory. A batch location names a directory whose
    entries are all returned.
    """
    if raw and batch:
        config.log(f"  Raw path batch job provided, parsing entries in {loc}")
        return _list_directory(loc), loc

    if raw:
        config.log("  Single file raw path provided")
        directory, name = _split_path(loc)
        return [name], directory

    if batch:
        path = config.input_dir + loc
        config.log(f"  Batch job provided, parsing entries in {path}")
        return _list_directory(path), path

    if not flags_used:
        path = config.input_dir + loc
        config.log(f"  Single file location provided, extracting file from {path}")
        directory, name = _split_path(path)
        return [name], directory

    config.log("  Only configuration flags provided")
    raise NothingToDo()


def output_filename(source_name: str, graph_type: str, extension: str) -> str:
    """Build the graph's file name from the source name, graph type and extension."""
    stem = source_name.split(".", 1)[0]
    return f"{stem}_{graph_type}.{extension.lower()}"


def save_graph_to_file(
    image: Image.Image,
    source_name: str,
    file_type: str,
    directory: str,
    graph_type: str = "bargraph",
) -> Path:
    """Save a rendered graph into `directory`, creating it when missing."""
    full_path = Path(directory + output_filename(source_name, graph_type, file_type))

    out_dir = Path(directory)
    if not out_dir.is_dir():
        try:
            out_dir.mkdir()
        except OSError as exc:
            raise FileControlError("Failed to create output directory") from exc

    try:
        if file_type == "PNG":
            image.save(full_path, format="PNG")
        elif file_type == "JPEG":
            image.convert("RGB").save(full_path, format="JPEG", quality=50)
        else:
            raise FileControlError(
                "Unrecognized file extension detected, failed to save"
            )
    except OSError as exc:
        raise FileControlError(f"Failed to save image as {full_path}") from exc
    return full_path