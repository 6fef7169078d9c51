from .exceptions import (
    MTLError,
    ParseError,
    MalformedNumber,
    IlluminationOutOfRange,
    MissingFilePath,
    MissingRequiredName,
    UnwritableValue,
)
from .illumination import Illumination
from .elements import Color, Comment, TextureMap, BumpMap, Material
from .library import Library
from .parser import parse, parse_into, parse_line
from .loader import load_library, save_library

__all__ = [
    "MTLError",
    "ParseError",
    "MalformedNumber",
    "IlluminationOutOfRange",
    "MissingFilePath",
    "MissingRequiredName",
    "UnwritableValue",
    "Illumination",
    "Color",
    "Comment",
    "TextureMap",
    "BumpMap",
    "Material",
    "Library",
    "parse",
    "parse_into",
    "parse_line",
    "load_library",
    "save_library",
]
