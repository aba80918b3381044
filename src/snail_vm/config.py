from __future__ import annotations

from dataclasses import dataclass

from snail_core.errors import PairSearchConfigError


@dataclass(frozen=True, slots=True)
class PairSearchConfig:
    """Batching for the all-pairs magnitude search.

    chunk_size: ordered pairs evaluated per vmapped kernel call; the last
    chunk is padded so every call shares one compiled shape.
    """

    chunk_size: int = 1024

    def __post_init__(self):
        if not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise PairSearchConfigError(
                f"chunk_size must be a positive int, got {self.chunk_size!r}",
                context="pair_search_config",
            )


DEFAULT_PAIR_SEARCH_CONFIG = PairSearchConfig()

__all__ = ["PairSearchConfig", "DEFAULT_PAIR_SEARCH_CONFIG"]
