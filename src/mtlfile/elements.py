from dataclasses import dataclass, fields, MISSING
from typing import Optional

from mtlfile.exceptions import MissingRequiredName, UnwritableValue
from mtlfile.illumination import Illumination

# Map modifier flags that take one numeric argument
MAP_VALUE_FLAGS = {"-s": "scale", "-o": "offset"}
BUMP_VALUE_FLAGS = {**MAP_VALUE_FLAGS, "-bm": "intensity"}
TRANSFORM_FLAG = "-t"


def format_float(value: float) -> str:
    # repr gives the shortest text that parses back to the same float
    return repr(float(value))


class _Element:
    """
    Fluent mutation shared by all MTL elements.
    """

    def set(self, **values):
        """
        Assign the named fields and return the element, so calls can be chained:
        `Material().set(name="brick", transparency=0.5)`.
        """
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in known:
                raise AttributeError(f"{type(self).__name__} has no field {key!r}")
            setattr(self, key, value)
        return self

    def clear(self, *names):
        """
        Reset the named optional fields to their absent state and return the element.
        """
        defaults = {f.name: f.default for f in fields(self)}
        for key in names:
            if key not in defaults:
                raise AttributeError(f"{type(self).__name__} has no field {key!r}")
            if defaults[key] is MISSING:
                raise AttributeError(f"{type(self).__name__}.{key} is required and cannot be cleared")
            setattr(self, key, defaults[key])
        return self


@dataclass
class Color(_Element):
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def to_text(self) -> str:
        return f"{format_float(self.r)} {format_float(self.g)} {format_float(self.b)}"


@dataclass
class Comment(_Element):
    text: Optional[str] = None

    def is_blank(self) -> bool:
        return self.text is None or not self.text.strip()

    def to_text(self) -> str:
        """
        Render as `# text`. Trailing whitespace is dropped because the parser
        trims lines; a blank comment renders as a lone `#`, which reads back
        as nothing.
        """
        if self.is_blank():
            return "#"
        if "\n" in self.text or "\r" in self.text:
            raise UnwritableValue(f"comment {self.text!r} spans more than one line")
        return f"# {self.text.rstrip()}"


def _map_options(scale: Optional[float], offset: Optional[float], transform: bool) -> list[str]:
    parts = []
    if scale is not None:
        parts.append(f"-s {format_float(scale)}")
    if offset is not None:
        parts.append(f"-o {format_float(offset)}")
    if transform:
        parts.append("-t")
    return parts


def _check_file(file: str, value_flags: dict[str, str]) -> None:
    """
    A map file is written as whitespace-separated tokens after the flags, so
    it must read back as the same tokens and must not start with a flag.
    """
    tokens = file.split() if file else []
    if not tokens or " ".join(tokens) != file:
        raise UnwritableValue(f"map file {file!r} would not read back unchanged")
    if tokens[0] == TRANSFORM_FLAG or tokens[0] in value_flags:
        raise UnwritableValue(f"map file {file!r} starts with a modifier flag")


@dataclass
class TextureMap(_Element):
    file: str
    scale: Optional[float] = None
    offset: Optional[float] = None
    transform: bool = False

    def to_text(self) -> str:
        _check_file(self.file, MAP_VALUE_FLAGS)
        parts = _map_options(self.scale, self.offset, self.transform)
        parts.append(self.file)
        return " ".join(parts)


@dataclass
class BumpMap(_Element):
    """
    A texture map with an extra bump intensity (`-bm`).
    """
    file: str
    scale: Optional[float] = None
    offset: Optional[float] = None
    transform: bool = False
    intensity: Optional[float] = None

    def to_text(self) -> str:
        _check_file(self.file, BUMP_VALUE_FLAGS)
        parts = []
        if self.intensity is not None:
            parts.append(f"-bm {format_float(self.intensity)}")
        parts.extend(_map_options(self.scale, self.offset, self.transform))
        parts.append(self.file)
        return " ".join(parts)


@dataclass
class Material(_Element):
    # name may be unset while the material is being built, but not when written
    name: Optional[str] = None
    transparency: Optional[float] = None
    specular_exponent: Optional[float] = None
    illumination: Optional[Illumination] = None
    ambient_color: Optional[Color] = None
    diffuse_color: Optional[Color] = None
    specular_color: Optional[Color] = None
    ambient_map: Optional[TextureMap] = None
    diffuse_map: Optional[TextureMap] = None
    specular_map: Optional[TextureMap] = None
    transparency_map: Optional[TextureMap] = None
    bump_map: Optional[BumpMap] = None

    def to_text(self) -> str:
        """
        Render the material as a `newmtl` block. Every line, including the last,
        ends with a newline; absent fields produce no line.

        The name must be a single whitespace-free token, since `newmtl` reads
        only one.
        """
        if not self.name:
            raise MissingRequiredName("material has no name")
        if self.name.split() != [self.name]:
            raise UnwritableValue(f"material name {self.name!r} contains whitespace")

        lines = [f"newmtl {self.name}"]

        if self.transparency is not None:
            lines.append(f"d {format_float(self.transparency)}")
        if self.specular_exponent is not None:
            lines.append(f"Ns {format_float(self.specular_exponent)}")
        if self.illumination is not None:
            lines.append(f"illum {int(self.illumination)}")

        for keyword, color in (
            ("Ka", self.ambient_color),
            ("Kd", self.diffuse_color),
            ("Ks", self.specular_color),
        ):
            if color is not None:
                lines.append(f"{keyword} {color.to_text()}")

        for keyword, texture in (
            ("map_Ka", self.ambient_map),
            ("map_Kd", self.diffuse_map),
            ("map_Ks", self.specular_map),
            ("map_d", self.transparency_map),
            ("map_Bump", self.bump_map),
        ):
            if texture is not None:
                lines.append(f"{keyword} {texture.to_text()}")

        return "\n".join(lines) + "\n"
