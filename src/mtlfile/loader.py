import logging
from pathlib import Path
from typing import Optional, Union

from mtlfile.config import get_encoding
from mtlfile.library import Library
from mtlfile.parser import parse

logger = logging.getLogger(__name__)


def load_library(file_path: Union[str, Path], encoding: Optional[str] = None) -> Library:
    """
    Read and parse an .mtl file.
    """
    file_path = Path(file_path)
    logger.info("Loading material library: %s", file_path)
    with open(file_path, "r", encoding=encoding or get_encoding()) as f:
        return parse(f)


def save_library(library: Library, file_path: Union[str, Path], encoding: Optional[str] = None) -> None:
    # to_text() can raise; do it before the file is opened
    text = library.to_text()
    file_path = Path(file_path)
    logger.info("Writing %d materials to %s", len(library.materials), file_path)
    file_path.write_text(text, encoding=encoding or get_encoding())
