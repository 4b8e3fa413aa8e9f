"""Configuration values and the AbrPrint.cfg file that stores them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CONFIG_NAME = "AbrPrint.cfg"
DEBUG_LOCATION = Path("x64") / "Debug"


@dataclass(frozen=True)
class Color:
    """An RGBA colour used for rendering."""

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class ConfigError(Exception):
    """Raised when the configuration file cannot be read, written or understood."""


IMG_W = 1200
IMG_H = 800

BKGD_COLOR = Color(220, 235, 240, 255)
GRAPH_COLOR1 = Color(40, 50, 80, 255)
GRAPH_COLOR2 = Color(185, 200, 225, 255)

BAR_COLORS: tuple[Color, ...] = (
    Color(210, 70, 70), Color(150, 20, 20), Color(75, 210, 70), Color(34, 150, 20),
    Color(70, 90, 210), Color(20, 60, 150), Color(210, 70, 170), Color(150, 20, 90),
    Color(210, 145, 70), Color(150, 90, 20), Color(70, 210, 140), Color(20, 150, 100),
    Color(130, 70, 210), Color(25, 20, 150), Color(210, 70, 150), Color(150, 20, 150),
    Color(210, 190, 70), Color(150, 140, 20), Color(70, 210, 195), Color(20, 140, 150),
    Color(70, 150, 210), Color(100, 20, 150), Color(210, 70, 210), Color(143, 20, 80),
)

GRAPH_PADDING = 150
GRAPH_THICKNESS = 5

SUPPORTED_TYPES = ("PNG", "JPEG")

# Field name in the file -> attribute of Config
FIELDS = {
    "ABR_INPUT_DIR": "input_dir",
    "ABR_TYPEFACE_DIR": "typeface_dir",
    "ABR_TYPEFACE_NAME": "typeface_name",
    "ABR_OUTPUT_DIR": "output_dir",
    "ABR_OUTPUT_EXT": "output_ext",
}


@dataclass
class Config:
    """The active configuration of a run."""

    input_dir: str = "./"
    typeface_dir: str = "./"
    typeface_name: str = "Consolas"
    output_dir: str = "./"
    output_ext: str = "PNG"
    debug: bool = False

    def log(self, message: str) -> None:
        """Print a debug message when debug mode is on."""
        if self.debug:
            print(message)


def find_config_file(directory: str | Path = ".") -> Path | None:
    """Return the configuration file in `directory` or its debug location, if any."""
    base = Path(directory)
    for candidate in (base / CONFIG_NAME, base / DEBUG_LOCATION / CONFIG_NAME):
        if candidate.is_file():
            return candidate
    return None


def generate_config_file(path: str | Path) -> Path:
    """Write a configuration file holding the default values."""
    path = Path(path)
    defaults = Config()
    text = "".join(
        f"{field}\t{getattr(defaults, attr)}\n" for field, attr in FIELDS.items()
    )
    try:
        path.write_text(text)
    except OSError as exc:
        raise ConfigError(f"Error writing configuration file {path}") from exc
    return path


def _locate_or_create(directory: str | Path) -> Path:
    path = find_config_file(directory)
    if path is None:
        path = generate_config_file(Path(directory) / CONFIG_NAME)
    return path


def _read_tokens(path: Path) -> list[str]:
    try:
        return path.read_text().split()
    except OSError as exc:
        raise ConfigError(f"Error reading configuration file {path}") from exc


def update_config(field_name: str, value: str, directory: str | Path = ".") -> Path:
    """Replace the value of one field in the configuration file, keeping the rest."""
    path = _locate_or_create(directory)
    tokens = iter(_read_tokens(path))

    lines = []
    for entry in tokens:
        line = entry + "\t"
        if entry == field_name:
            line += value
            next(tokens, None)
        elif entry in FIELDS:
            line += next(tokens, "")
        lines.append(line + "\n")

    try:
        path.write_text("".join(lines))
    except OSError as exc:
        raise ConfigError(f"Error writing configuration file {path}") from exc
    return path


def load_config(directory: str | Path = ".") -> Config:
    """Read the configuration file, creating a default one when none exists."""
    path = _locate_or_create(directory)
    config = Config()
    tokens = iter(_read_tokens(path))
    for entry in tokens:
        attr = FIELDS.get(entry)
        if attr is None:
            raise ConfigError("Unrecognized field detected in AbrPrint configuration file")
        value = next(tokens, None)
        if value is not None:
            setattr(config, attr, value)
    return config