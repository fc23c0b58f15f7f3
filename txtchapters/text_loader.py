"""Reading plain-text manuscripts from disk."""

import logging
from pathlib import Path

from .config import DEFAULT_ENCODINGS
from .errors import InvalidFileFormatError, SourceNotFoundError, TextDecodingError
from .models import Chapter
from .segmenter import Segmenter

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = [".txt"]


def is_text_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def decode_text(raw: bytes, encodings: list[str], source: str = "<bytes>") -> str:
    """Decode raw bytes with the first encoding that succeeds.

    Raises:
        TextDecodingError: If every encoding fails
    """
    for encoding in encodings:
        try:
            text = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("Decoding %s as %s failed: %s", source, encoding, e)
            continue
        logger.debug("Decoded %s as %s", source, encoding)
        return text
    raise TextDecodingError(source, encodings)


def read_text_file(path: str | Path, encodings: list[str] | None = None) -> str:
    """Read a .txt file into a single string.

    Args:
        path: File to read
        encodings: Encodings to try in order (default: UTF-8, then GB18030)

    Raises:
        SourceNotFoundError: If the file does not exist
        InvalidFileFormatError: If the file is not a .txt file
        TextDecodingError: If the bytes cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(str(path))
    if not is_text_file(path):
        raise InvalidFileFormatError(
            str(path), SUPPORTED_EXTENSIONS, actual_format=path.suffix or None
        )

    return decode_text(path.read_bytes(), encodings or DEFAULT_ENCODINGS, source=str(path))


def load_chapters(
    path: str | Path,
    segmenter: Segmenter | None = None,
    encodings: list[str] | None = None,
) -> list[Chapter]:
    """Read a text file and segment it into chapters."""
    text = read_text_file(path, encodings)
    segmenter = segmenter or Segmenter()
    chapters = segmenter.segment(text)
    logger.info("Loaded %s: %d chapters", Path(path).name, len(chapters))
    return chapters
