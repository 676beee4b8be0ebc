"""PatcherConfig: settings shared by the api functions and NodeEditor.

PatcherConfig is a frozen (immutable) dataclass validated on construction.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PatcherConfig"]


@dataclass(frozen=True, slots=True)
class PatcherConfig:
    """Immutable configuration for patching and describing documents.

    Attributes:
        indent: Indentation used when serializing the patched document.
            ``None`` produces compact single-line output.  Default 2.
        declared_keys: Fixed FieldSet layout for StructuredFields mode (e.g.
            ``NAME_COLOR_KEYS``).  ``None`` (default) collects every
            primitive-valued key of the object instead.
        cache_size: Number of parsed documents kept by a NodeEditor's
            DocumentCache.  Default 16.
        sink_attempts: How many times the buffer sink write is tried before
            its failure is reported.  Default 3.
        sink_retry_wait: Seconds to wait between sink attempts.  Default 0.0.
    """

    indent: int | None = 2
    declared_keys: tuple[str, ...] | None = None
    cache_size: int = 16
    sink_attempts: int = 3
    sink_retry_wait: float = 0.0

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0 or None, got {self.indent}"
            raise ValueError(msg)
        if self.declared_keys is not None:
            if isinstance(self.declared_keys, str):
                msg = f"declared_keys must be a tuple of keys, got {self.declared_keys!r}"
                raise ValueError(msg)
            # frozen: bypass __setattr__ to normalize lists to tuples
            object.__setattr__(self, "declared_keys", tuple(self.declared_keys))
        if self.cache_size < 1:
            msg = f"cache_size must be >= 1, got {self.cache_size}"
            raise ValueError(msg)
        if self.sink_attempts < 1:
            msg = f"sink_attempts must be >= 1, got {self.sink_attempts}"
            raise ValueError(msg)
        if self.sink_retry_wait < 0.0:
            msg = f"sink_retry_wait must be >= 0.0, got {self.sink_retry_wait}"
            raise ValueError(msg)
