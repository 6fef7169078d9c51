import io
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from mtlfile.elements import (
    BUMP_VALUE_FLAGS,
    BumpMap,
    Color,
    Comment,
    MAP_VALUE_FLAGS,
    Material,
    TRANSFORM_FLAG,
    TextureMap,
)
from mtlfile.exceptions import MalformedNumber, MissingFilePath, ParseError
from mtlfile.illumination import Illumination
from mtlfile.library import Library

logger = logging.getLogger(__name__)

COLOR_FIELDS = {
    "Ka": "ambient_color",
    "Kd": "diffuse_color",
    "Ks": "specular_color",
}

MAP_FIELDS = {
    "map_Ka": "ambient_map",
    "map_Kd": "diffuse_map",
    "map_Ks": "specular_map",
    "map_d": "transparency_map",
}

BUMP_KEYWORDS = ("map_Bump", "bump")
TRANSPARENCY_KEYWORDS = ("d", "Tr")


@dataclass
class Directive:
    keyword: str
    # Whitespace-split arguments after the keyword
    params: list[str] = field(default_factory=list)
    # Everything after the single separator following the keyword (used for comments)
    text: str = ""


def parse_line(line: str) -> Optional[Directive]:
    """
    Split one line into a Directive. Blank lines and lines with a lone token
    (including a bare `#`) carry nothing and return None.
    """
    line = line.strip()
    parts = line.split()
    if len(parts) < 2:
        return None
    return Directive(keyword=parts[0], params=parts[1:], text=line[len(parts[0]) + 1:])


def _check_plain_number(token: str, line_number: int) -> None:
    # float() and int() accept digit separators, which MTL does not
    if "_" in token:
        raise MalformedNumber(f"expected a number, got {token!r}", line_number)


def _to_float(token: str, line_number: int) -> float:
    _check_plain_number(token, line_number)
    try:
        return float(token)
    except ValueError as e:
        raise MalformedNumber(f"expected a number, got {token!r}", line_number) from e


def _to_int(token: str, line_number: int) -> int:
    _check_plain_number(token, line_number)
    try:
        return int(token)
    except ValueError as e:
        raise MalformedNumber(f"expected an integer, got {token!r}", line_number) from e


def _parse_color(params: list[str], line_number: int) -> Color:
    if len(params) < 3:
        raise MalformedNumber(f"a color needs 3 components, got {len(params)}", line_number)
    r, g, b = (_to_float(p, line_number) for p in params[:3])
    return Color(r, g, b)


def _parse_map_options(params: list[str], value_flags: dict[str, str], line_number: int) -> dict:
    """
    Consume leading modifier flags. Flags may come in any order; the first
    token that is not a flag starts the file path, and any tokens after it
    belong to the path too (file names can have spaces).
    """
    options = {}
    pos = 0
    while pos < len(params):
        token = params[pos]
        if token == TRANSFORM_FLAG:
            options["transform"] = True
            pos += 1
        elif token in value_flags:
            if pos + 1 >= len(params):
                raise MalformedNumber(f"flag {token} needs a value", line_number)
            options[value_flags[token]] = _to_float(params[pos + 1], line_number)
            pos += 2
        else:
            break

    if pos >= len(params):
        raise MissingFilePath("map has no file path", line_number)
    options["file"] = " ".join(params[pos:])
    return options


def _parse_texture_map(params: list[str], line_number: int) -> TextureMap:
    return TextureMap(**_parse_map_options(params, MAP_VALUE_FLAGS, line_number))


def _parse_bump_map(params: list[str], line_number: int) -> BumpMap:
    return BumpMap(**_parse_map_options(params, BUMP_VALUE_FLAGS, line_number))


def _apply(material: Material, cmd: Directive, line_number: int) -> bool:
    """
    Apply a material directive. Returns False if the keyword is not one we know.
    """
    keyword = cmd.keyword
    if keyword in TRANSPARENCY_KEYWORDS:
        material.transparency = _to_float(cmd.params[0], line_number)
    elif keyword == "Ns":
        material.specular_exponent = _to_float(cmd.params[0], line_number)
    elif keyword == "illum":
        index = _to_int(cmd.params[0], line_number)
        try:
            material.illumination = Illumination.from_index(index)
        except ParseError as e:
            e.line_number = line_number
            raise
    elif keyword in COLOR_FIELDS:
        setattr(material, COLOR_FIELDS[keyword], _parse_color(cmd.params, line_number))
    elif keyword in MAP_FIELDS:
        setattr(material, MAP_FIELDS[keyword], _parse_texture_map(cmd.params, line_number))
    elif keyword in BUMP_KEYWORDS:
        material.bump_map = _parse_bump_map(cmd.params, line_number)
    else:
        return False
    return True


def parse(source: Union[str, Iterable[str]], target: Optional[Library] = None) -> Library:
    """
    Parse MTL text into a Library.

    Args:
        source: The MTL text, or any iterable of lines (e.g. an open file).
        target: An existing Library to fill. Its comments and materials are
            cleared first. A new Library is created if omitted.

    Returns:
        The populated Library (`target` itself when one was given).

    Raises:
        MalformedNumber: A numeric argument is missing or not a number.
        IlluminationOutOfRange: An `illum` index outside 0-10.
        MissingFilePath: A map directive with flags but no file.
    """
    if target is None:
        target = Library()
    else:
        target.clear_comments().clear_materials()

    # StringIO splits lines the same way an open text file does
    lines = io.StringIO(source, newline=None) if isinstance(source, str) else source

    material: Optional[Material] = None
    for line_number, line in enumerate(lines, start=1):
        cmd = parse_line(line)
        if not cmd:
            continue

        if cmd.keyword == "#":
            target.add_comment(Comment(text=cmd.text))
        elif cmd.keyword == "newmtl":
            if material is not None:
                target.add_material(material)
            material = Material(name=cmd.params[0])
        elif material is None:
            # Nothing to attach it to before the first newmtl
            logger.debug("line %d: dropping %r before first newmtl", line_number, cmd.keyword)
        elif not _apply(material, cmd, line_number):
            logger.debug("line %d: ignoring unknown directive %r", line_number, cmd.keyword)

    if material is not None:
        target.add_material(material)

    logger.debug("Parsed %d materials and %d comments", len(target.materials), len(target.comments))
    return target


def parse_into(source: Union[str, Iterable[str]], library: Library) -> Library:
    """
    Parse into an existing Library, replacing whatever it held.
    """
    return parse(source, library)
