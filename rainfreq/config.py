"""
Configuration module for RainFreq.

Defines the RainFreqConfig dataclass with all analysis parameters.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional
import yaml
from datetime import datetime

from .analysis.distributions import Distribution, validate_confidence_index
from .analysis.frequency import DEFAULT_RETURN_PERIODS, check_return_period


@dataclass
class RainFreqConfig:
    """Configuration for a RainFreq analysis."""
    # Core inputs
    rainfall_file: str
    station_id: Optional[str] = None  # Taken from staNo or file name if not given

    # Analysis selection
    durations: Optional[List[int]] = None  # None = every duration in the file
    distributions: List[str] = field(
        default_factory=lambda: [d.short_name for d in Distribution]
    )
    return_periods: List[float] = field(default_factory=lambda: list(DEFAULT_RETURN_PERIODS))
    confidence_index: int = 2  # 0-4 -> 85%, 90%, 95%, 97.5%, 99%

    # Output settings
    output_dir: str = "output"
    figure_format: str = "png"
    figure_dpi: int = 300
    make_figures: bool = True

    # Derived attributes (set after loading)
    run_timestamp: Optional[str] = None

    def __post_init__(self):
        """Validate selections and set derived attributes."""
        validate_confidence_index(self.confidence_index)
        self.distributions = [Distribution.parse(d).short_name for d in self.distributions]
        for T in self.return_periods:
            check_return_period(T)
        if self.run_timestamp is None:
            self.run_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    @property
    def distribution_types(self) -> List[Distribution]:
        """Selected distributions as enum members."""
        return [Distribution.parse(d) for d in self.distributions]

    @property
    def output_run_dir(self) -> Path:
        """Get the timestamped output directory for this run."""
        return Path(self.output_dir) / f"run_{self.run_timestamp}"

    @property
    def figures_dir(self) -> Path:
        """Get the figures subdirectory."""
        return self.output_run_dir / "figures"

    @property
    def tables_dir(self) -> Path:
        """Get the tables subdirectory."""
        return self.output_run_dir / "tables"

    def create_output_dirs(self) -> None:
        """Create all output directories."""
        for d in [self.output_run_dir, self.figures_dir, self.tables_dir]:
            d.mkdir(parents=True, exist_ok=True)

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to YAML file."""
        if path is None:
            path = self.output_run_dir / "config.yaml"

        # Convert to dict, excluding None values
        config_dict = {
            k: v for k, v in self.__dict__.items()
            if v is not None and not k.startswith('_')
        }

        with open(path, 'w') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, path: str) -> "RainFreqConfig":
        """Load configuration from YAML file."""
        return cls(**_read_yaml(path))


# Map YAML keys to dataclass fields
FIELD_MAPPING = {
    'file': 'rainfall_file',
    'station': 'station_id',
    'confidence': 'confidence_index',
    'directory': 'output_dir',
    'format': 'figure_format',
    'dpi': 'figure_dpi',
}


def _read_yaml(path: str) -> dict:
    """Flatten nested sections, map short keys and drop unknown ones."""
    with open(path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}

    # Handle nested structure if present
    flat_dict = {}
    for key, value in config_dict.items():
        if isinstance(value, dict):
            flat_dict.update(value)
        else:
            flat_dict[key] = value

    valid_keys = {f.name for f in fields(RainFreqConfig)}
    processed = {}
    for key, value in flat_dict.items():
        key = FIELD_MAPPING.get(key, key)
        if key in valid_keys:
            processed[key] = value
    return processed


def load_config(config_path: Optional[str] = None, **overrides) -> RainFreqConfig:
    """
    Load configuration from file and/or keyword arguments.

    Parameters
    ----------
    config_path : str, optional
        Path to YAML configuration file
    **overrides : dict
        Keyword arguments to override config values. None values are
        ignored so unset CLI options do not clobber the file.

    Returns
    -------
    RainFreqConfig
        Configuration object
    """
    config_data = _read_yaml(config_path) if config_path else {}

    # Apply overrides from CLI
    config_data.update({k: v for k, v in overrides.items() if v is not None})

    # Ensure required arguments are present
    if 'rainfall_file' not in config_data:
        raise ValueError("Missing required argument: rainfall_file")

    # Filter out any keys not in the dataclass
    valid_keys = {f.name for f in fields(RainFreqConfig)}
    filtered_data = {k: v for k, v in config_data.items() if k in valid_keys}

    return RainFreqConfig(**filtered_data)
