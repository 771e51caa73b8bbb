"""Trainer configuration."""

from typing import Optional


class TrainerConfig:
    """Settings shared by the advisor, drills and CLI."""

    def __init__(
        self,
        ukeire_tolerance: int = 2,   # Acceptance loss still rated GOOD
        cache_size: int = 4096,
        use_red_fives: bool = True,
        language: str = "en",
        seed: Optional[int] = None,
        log_dir: Optional[str] = None,
    ):
        if ukeire_tolerance < 0:
            raise ValueError(f"ukeire_tolerance must be >= 0, got {ukeire_tolerance}")
        self.ukeire_tolerance = ukeire_tolerance
        self.cache_size = cache_size
        self.use_red_fives = use_red_fives
        self.language = language
        self.seed = seed
        self.log_dir = log_dir

    def to_dict(self) -> dict:
        return {
            "ukeire_tolerance": self.ukeire_tolerance,
            "cache_size": self.cache_size,
            "use_red_fives": self.use_red_fives,
            "language": self.language,
            "seed": self.seed,
        }
