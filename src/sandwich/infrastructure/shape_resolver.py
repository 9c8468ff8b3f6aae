"""Resolution of shape references to embeddable SVG markup.

A shape reference is a path to an SVG file. The resolver returns the markup
inside the file's root ``<svg>`` element so it can be nested in a group of
another drawing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Prefixes kept on re-serialization instead of ns0, ns1, ...
_KNOWN_NAMESPACES: dict[str, str] = {
    "": SVG_NAMESPACE,
    "xlink": XLINK_NAMESPACE,
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "cc": "http://creativecommons.org/ns#",
    "dc": "http://purl.org/dc/elements/1.1/",
}

for _prefix, _uri in _KNOWN_NAMESPACES.items():
    ET.register_namespace(_prefix, _uri)


class ShapeResolutionError(Exception):
    """Base class for failures turning a shape reference into markup.

    Attributes:
        shape: The shape reference that could not be resolved.
    """

    def __init__(self, shape: str, message: str) -> None:
        self.shape = shape
        super().__init__(message)


class ResourceUnavailableError(ShapeResolutionError):
    """Raised when the shape file is missing or cannot be read."""

    pass


class ShapeParseError(ShapeResolutionError):
    """Raised when the shape file is not well-formed XML."""

    pass


class SvgShapeResolver:
    """Reads SVG files and returns the markup of their root's children.

    Results are cached per shape reference for the lifetime of the resolver,
    so a shape used in many layers is read once.

    Attributes:
        base_dir: Directory relative shape paths are resolved against
            (None means the current working directory).
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir
        self._cache: dict[str, str] = {}

    def path_for(self, shape: str) -> Path:
        """Filesystem path a shape reference points to."""
        path = Path(shape)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def resolve(self, shape: str) -> str:
        """Return the inner markup of the SVG file behind ``shape``.

        Raises:
            ResourceUnavailableError: If the file is missing or unreadable.
            ShapeParseError: If the file is not well-formed XML.
        """
        if shape in self._cache:
            return self._cache[shape]

        path = self.path_for(shape)
        try:
            content = path.read_bytes()
        except FileNotFoundError:
            raise ResourceUnavailableError(shape, f"Shape file not found: {path}")
        except OSError as e:
            raise ResourceUnavailableError(shape, f"Cannot read shape file {path}: {e}")

        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ShapeParseError(shape, f"Unable to parse {path}: {e}")

        inner = "".join(ET.tostring(child, encoding="unicode") for child in root)
        logger.debug(f"Resolved {shape} ({len(root)} elements)")
        self._cache[shape] = inner
        return inner

    def clear_cache(self) -> None:
        self._cache.clear()
