"""ContextVar-based format configuration for Tablero.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Every formatting function and editor command accepts an explicit config;
when none is given, the context value is used.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    from tablero import FormatConfig, format_table
    result = format_table(table, FormatConfig(min_delimiter_width=5))

    # Context-scoped config (e.g. one per open buffer)
    with format_config_context(FormatConfig(default_alignment=Alignment.CENTER)):
        editor.format()

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from tablero.alignment import Alignment, FormatType


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatting configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        min_delimiter_width: Minimum number of dashes in a delimiter cell,
            which is also the minimum column width
        default_alignment: How columns without a colon marker are padded
        header_alignment: Alignment for header cells; None follows the column
        margin_left: Text prefixed to every rendered line; None keeps the
            header row's own indentation
        trim_content: Strip surrounding whitespace from cell content before
            measuring and padding
        format_type: NORMAL aligns columns, WEAK only normalizes padding
        ambiguous_as_wide: Count East Asian Ambiguous characters as 2 columns
        normalize: NFC-normalize text before measuring
        wide_chars: Characters always counted as 2 columns
        narrow_chars: Characters always counted as 1 column
        text_width: Replacement display-width function (overrides all of the
            width options above)
        max_edit_distance: Bound for the line diff; above it the whole table
            range is replaced

    """

    min_delimiter_width: int = 3
    default_alignment: Alignment = Alignment.LEFT
    header_alignment: Alignment | None = None
    margin_left: str | None = None
    trim_content: bool = True
    format_type: FormatType = FormatType.NORMAL
    ambiguous_as_wide: bool = False
    normalize: bool = False
    wide_chars: frozenset[str] = frozenset()
    narrow_chars: frozenset[str] = frozenset()
    text_width: Callable[[str], int] | None = None
    max_edit_distance: int = 3

    def __post_init__(self) -> None:
        if self.min_delimiter_width < 1:
            raise ValueError(f"min_delimiter_width must be at least 1, got {self.min_delimiter_width}")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Useful for editor integration where settings come from JSON or
        YAML files. Enum fields accept either enum members or their names
        / values as strings, and character sets accept any iterable.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "default_alignment": "center",
            ...     "min_delimiter_width": 5,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_alignment
            <Alignment.CENTER: 'center'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        for key, enum_type in (
            ("default_alignment", Alignment),
            ("header_alignment", Alignment),
            ("format_type", FormatType),
        ):
            if isinstance(filtered.get(key), str):
                filtered[key] = _coerce_enum(enum_type, filtered[key])
        for key in ("wide_chars", "narrow_chars"):
            if key in filtered:
                filtered[key] = frozenset(filtered[key])
        return cls(**filtered)


def _coerce_enum(enum_type: type[Enum], value: str) -> Enum:
    try:
        return enum_type(value.lower())
    except ValueError:
        pass
    try:
        return enum_type[value.upper()]
    except KeyError:
        raise ValueError(f"Unknown {enum_type.__name__}: {value!r}") from None


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

# Thread-local configuration via ContextVar
_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (thread-local).

    Returns:
        The active FormatConfig for this thread/context.

    """
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: FormatConfig to use within the context.

    Yields:
        None

    Example:
        >>> with format_config_context(FormatConfig(min_delimiter_width=1)):
        ...     get_format_config().min_delimiter_width
        1

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
]
