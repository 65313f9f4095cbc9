"""Converter configuration held in a ContextVar.

One ConverterConfig is active per context. RtfConverter installs its own
config around each call; configure() installs one for the caller's context.
Parsers read the active config once, when they are constructed, and the
chunk source reads the delimiter and encoding from it.

Thread Safety:
    Each thread (and each asyncio task) sees its own value. Configs are
    frozen, so one instance can be installed in many contexts at once.

Usage:
    from rtfhtml import configure, convert_text
    configure({"sectionDelimiter": "----"})
    fragments = convert_text(source)

    # Scoped override for direct Parser use
    with convert_config_context(ConverterConfig(max_list_depth=2)):
        html = Parser(chunk).parse()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Any

from rtfhtml.errors import ConfigError
from rtfhtml.markers import DEFAULT_MARKERS, MarkerTable

# camelCase spellings accepted by from_dict
_OPTION_ALIASES: dict[str, str] = {
    "sectionDelimiter": "section_delimiter",
    "escapeHtml": "escape_html",
    "flushOpenLists": "flush_open_lists",
    "maxListDepth": "max_list_depth",
}


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        section_delimiter: Split raw input into chunks on lines containing this
            literal. None treats the whole input as a single chunk.
        escape_html: HTML-escape extracted text before rendering
        flush_open_lists: Emit a list still open at the end of a chunk.
            False drops it silently.
        max_list_depth: Deepest nested list level recognized (0 = flat lists)
        strict: Raise MalformedContentError instead of stopping quietly
        markers: Marker table shared by all parser components
        encoding: Text encoding used when reading files

    """

    section_delimiter: str | None = None
    escape_html: bool = False
    flush_open_lists: bool = True
    max_list_depth: int = 1
    strict: bool = False
    markers: MarkerTable = DEFAULT_MARKERS
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.section_delimiter is not None and not self.section_delimiter:
            raise ConfigError("section_delimiter", "must be a non-empty string or None")
        if self.max_list_depth < 0:
            raise ConfigError("max_list_depth", f"must be >= 0, got {self.max_list_depth}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ConverterConfig":
        """Build a config from an option dictionary.

        Keys may be field names or their camelCase spellings; anything else
        is ignored. The legacy nested form ``{"sectionSeparation": {"separator": "----"}}``
        is accepted as well.

        Args:
            config_dict: Option dictionary

        Raises:
            ConfigError: A recognized option has an invalid value

        Example:
            >>> ConverterConfig.from_dict({"sectionDelimiter": "----", "x": 1}).section_delimiter
            '----'

        """
        fields = cls.__dataclass_fields__
        options: dict[str, Any] = {}

        legacy = config_dict.get("sectionSeparation")
        if isinstance(legacy, Mapping) and "separator" in legacy:
            options["section_delimiter"] = legacy["separator"]

        for key, value in config_dict.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in fields:
                options[name] = value
        return cls(**options)


_DEFAULT_CONFIG: ConverterConfig = ConverterConfig()

_convert_config: ContextVar[ConverterConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConverterConfig:
    """Return the config active in the current context."""
    return _convert_config.get()


def set_convert_config(config: ConverterConfig) -> None:
    """Install config for the current context until reset or replaced."""
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Install the default config for the current context."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConverterConfig) -> Iterator[None]:
    """Install config for the duration of a with block.

    The previously active config is restored on exit, including when the
    block raises. Contexts nest.

    Example:
        >>> with convert_config_context(ConverterConfig(escape_html=True)):
        ...     html = Parser("{\\\\rtlch \\\\ltrch a < b}").parse()
    """
    token: Token[ConverterConfig] = _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.reset(token)


__all__ = [
    "ConverterConfig",
    "convert_config_context",
    "get_convert_config",
    "reset_convert_config",
    "set_convert_config",
]
