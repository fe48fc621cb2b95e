from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

from ..puzzle.common import DEFAULT_GIVEN_COUNT
from ..puzzle.carver import validate_given_count

logger = logging.getLogger(__name__)

ENV_GIVENS = "SIXDOKU_GIVENS"
ENV_SEED = "SIXDOKU_SEED"
ENV_LOG_LEVEL = "SIXDOKU_LOG_LEVEL"

LOG_FORMAT = '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    given_count: int = DEFAULT_GIVEN_COUNT
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        validate_given_count(self.given_count)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Builds a config from SIXDOKU_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs = {}
        try:
            if env.get(ENV_GIVENS):
                kwargs["given_count"] = int(env[ENV_GIVENS])
            if env.get(ENV_SEED):
                kwargs["seed"] = int(env[ENV_SEED])
        except ValueError as e:
            logger.error(f"Invalid integer in environment configuration: {e}")
            raise ValueError(f"Invalid environment configuration: {e}") from e
        if env.get(ENV_LOG_LEVEL):
            kwargs["log_level"] = env[ENV_LOG_LEVEL]
        return cls(**kwargs)

    def configure_logging(self) -> None:
        logging.basicConfig(level=self.log_level, format=LOG_FORMAT)
        # basicConfig is a no-op once handlers exist, so set the level explicitly too
        logging.getLogger().setLevel(self.log_level)
