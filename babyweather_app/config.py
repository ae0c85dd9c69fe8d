"""Settings for the baby weather wardrobe advisor."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import Dict, Optional

from models.weather import ContextMode

DEFAULT_CONFIG_DIR = "config/environments"
DEFAULT_MODE = ContextMode.STROLLER.value
DEFAULT_AGE_MONTHS = 6
DEFAULT_WEIGHT_PERCENTILE = 50.0


def load_simple_yaml(path: Path) -> Dict[str, str]:
    """Read flat ``key: value`` lines; comments, blanks and nesting are ignored."""

    values: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.split(" #", 1)[0].strip()
        if not line or line.startswith("#") or ":" not in line or raw_line[:1].isspace():
            continue
        key, value = (part.strip() for part in line.split(":", 1))
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        values[key] = value
    return values


@dataclass
class AdvisorConfig:
    """Runtime settings; none of them change the clothing rules.

    ``tip_seed`` seeds the tip-of-the-day picker so repeated recomputes give
    identical meta cards. The ``default_*`` values form the profile used
    until the caller supplies a real one.
    """

    log_level: str = "INFO"
    tip_seed: Optional[int] = None
    default_mode: str = DEFAULT_MODE
    default_age_months: int = DEFAULT_AGE_MONTHS
    default_weight_percentile: float = DEFAULT_WEIGHT_PERCENTILE
    environment: Optional[str] = None
    source: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # raises ValueError for modes the rules do not know
        self.default_mode = ContextMode(self.default_mode).value

    @classmethod
    def from_env(cls) -> "AdvisorConfig":
        """Read settings from the environment, falling back to a YAML file.

        The file is ``APP_CONFIG_PATH`` if set, else
        ``<ADVISOR_CONFIG_DIR>/<APP_ENV>.yaml``. Upper-case environment
        variables (``TIP_SEED``, ``LOG_LEVEL``...) override file values.
        """

        env_name = os.getenv("APP_ENV")
        explicit_path = os.getenv("APP_CONFIG_PATH")
        path: Optional[Path] = None
        if explicit_path:
            path = Path(explicit_path)
        elif env_name:
            path = Path(os.getenv("ADVISOR_CONFIG_DIR", DEFAULT_CONFIG_DIR)) / f"{env_name}.yaml"

        file_values = load_simple_yaml(path) if path and path.exists() else {}

        def lookup(key: str) -> Optional[str]:
            value = os.getenv(key.upper(), file_values.get(key))
            return value if value not in (None, "") else None

        tip_seed = lookup("tip_seed")
        age = lookup("default_age_months")
        percentile = lookup("default_weight_percentile")
        return cls(
            log_level=(lookup("log_level") or "INFO").upper(),
            tip_seed=int(tip_seed) if tip_seed is not None else None,
            default_mode=lookup("default_mode") or DEFAULT_MODE,
            default_age_months=int(age) if age is not None else DEFAULT_AGE_MONTHS,
            default_weight_percentile=float(percentile) if percentile is not None else DEFAULT_WEIGHT_PERCENTILE,
            environment=env_name,
            source=str(path) if file_values else None,
        )
