"""Exceptions raised while loading registry data and assets."""

from __future__ import annotations


class ImpGraphError(Exception):
    """Base class for impgraph errors."""


class RegistryDataError(ImpGraphError):
    """Registry dataset cannot be read as a graph.

    Raised when the file is not UTF-8 JSON, or for structural problems: the
    payload is not an object, ``nodes``/``links`` are not arrays, a node has
    no ``id``, a link is not an object, or two nodes share an ``id``. Links
    pointing at unknown nodes are not an error.

    Attributes:
        reason: Short description of the structural problem
        source: Where the data came from (file path), if known
        message: Human-readable error message
    """

    def __init__(
        self,
        reason: str,
        source: str | None = None,
        message: str | None = None,
    ) -> None:
        self.reason = reason
        self.source = source
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if self.source:
            return f"Invalid registry data in {self.source}: {self.reason}"
        return f"Invalid registry data: {self.reason}"


class PaletteError(ImpGraphError):
    """Palette payload is not a mapping of group -> color.

    Individual malformed colors are not an error; they fall back to the
    default color at render time.
    """

    def __init__(self, source: str | None = None, message: str | None = None) -> None:
        self.source = source
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        where = f" in {self.source}" if self.source else ""
        return f"Palette{where} must be a JSON object mapping group names to colors"


class MissingAssetError(ImpGraphError):
    """A user-supplied force-graph bundle could not be read.

    Attributes:
        path: The path that was requested
    """

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        self.message = message or f"Cannot read force-graph bundle at '{path}'"
        super().__init__(self.message)


class ConfigError(ImpGraphError):
    """``pyproject.toml`` could not be parsed.

    Attributes:
        path: The pyproject.toml that failed to parse
        reason: Parser error text
    """

    def __init__(self, path: str, reason: str, message: str | None = None) -> None:
        self.path = path
        self.reason = reason
        self.message = message or f"Cannot parse {path}: {reason}"
        super().__init__(self.message)
