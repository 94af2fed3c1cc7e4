"""Plain-text reader with Hebrew encoding detection."""

import logging
from pathlib import Path

import chardet

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({".txt", ".md"})

# Below this chardet confidence a warning is logged.
MIN_CONFIDENCE = 0.7


class TextReader:
    """Reads pasted or exported Hebrew text files into a string.

    Handles UTF-8, UTF-16 and Windows-1255, the encodings Hebrew text
    commonly arrives in.
    """

    def read(self, file_path: str | Path) -> str:
        """Read a text file.

        Args:
            file_path: Path to a ``.txt`` or ``.md`` file.

        Returns:
            The decoded file content.

        Raises:
            FileNotFoundError: If file_path does not exist.
            ValueError: If the extension is not supported.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        ext = path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported file format: '{ext}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
            )

        return self._decode(path)

    def _decode(self, file_path: Path) -> str:
        """Decode a file: UTF-8 first, then chardet, then Windows-1255."""
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        raw_bytes = file_path.read_bytes()
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence") or 0

        if confidence < MIN_CONFIDENCE:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            try:
                return raw_bytes.decode("windows-1255")
            except UnicodeDecodeError:
                logger.error("Failed to decode file: %s", file_path)
                return raw_bytes.decode("utf-8", errors="replace")
