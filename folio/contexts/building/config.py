"""
Build Configuration

Loads build settings from a YAML file with OmegaConf. Defaults reproduce the
standard site layout:

    input_dir: .
    output_dir: _site
    data_file: _data/site.json
    passthrough: [admin, CNAME, me.jpg]
    ignores: [AGENTS.md]
    logs_dir: outs/logs

Relative paths resolve against `root`, which defaults to the directory of
the config file (or the working directory when no config file is used).

Examples:
    >>> config = load_build_config()                                  # site_config.yaml or defaults
    >>> config = load_build_config("site.yaml", ["output_dir=dist"])  # dotlist overrides
"""

import os
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CONFIG_PATH = Path(os.getenv("FOLIO_CONFIG_PATH", "site_config.yaml"))
LOGS_PATH_OVERRIDE = os.getenv("FOLIO_LOGS_PATH")


@dataclass
class BuildConfig:
    """
    Settings for one site build.

    Attributes:
        root: Base directory for relative paths
        input_dir: Directory holding passthrough sources
        output_dir: Directory the site is written to
        data_file: Data Store JSON file
        passthrough: Files or directories copied verbatim into the output
        ignores: Glob patterns excluded from passthrough copy
        logs_dir: Directory for build logs and the build event log
        console_level: Minimum log level echoed to the console (log files get DEBUG)
    """

    root: Optional[str] = None
    input_dir: str = "."
    output_dir: str = "_site"
    data_file: str = "_data/site.json"
    passthrough: List[str] = field(default_factory=lambda: ["admin", "CNAME", "me.jpg"])
    ignores: List[str] = field(default_factory=lambda: ["AGENTS.md"])
    logs_dir: str = "outs/logs"
    console_level: str = "INFO"

    def _resolve(self, value: str) -> Path:
        path = Path(value)
        if path.is_absolute():
            return path
        return Path(self.root or Path.cwd()) / path

    @property
    def input_path(self) -> Path:
        return self._resolve(self.input_dir)

    @property
    def output_path(self) -> Path:
        return self._resolve(self.output_dir)

    @property
    def data_path(self) -> Path:
        return self._resolve(self.data_file)

    @property
    def logs_path(self) -> Path:
        return self._resolve(self.logs_dir)

    def is_ignored(self, entry: str) -> bool:
        """Whether a passthrough entry matches one of the ignore patterns."""
        return any(fnmatch(entry, pattern) for pattern in self.ignores)


def load_build_config(
    config_path: Union[str, Path] = None,
    overrides: List[str] = None,
) -> BuildConfig:
    """
    Load build configuration.

    Args:
        config_path: YAML config file. Defaults to FOLIO_CONFIG_PATH (or
                     site_config.yaml); a missing default file means "use defaults".
        overrides: OmegaConf dotlist overrides (e.g., ["output_dir=dist"])

    Returns:
        BuildConfig with `root` set

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        omegaconf.errors.ConfigKeyError: If the file or overrides contain unknown keys
    """
    schema = OmegaConf.structured(BuildConfig)
    layers = [schema]
    root = Path.cwd()

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Build config not found: {config_path}")
    elif DEFAULT_CONFIG_PATH.exists():
        config_path = DEFAULT_CONFIG_PATH

    if config_path is not None:
        layers.append(OmegaConf.load(config_path))
        root = config_path.resolve().parent

    if LOGS_PATH_OVERRIDE:
        layers.append(OmegaConf.create({"logs_dir": LOGS_PATH_OVERRIDE}))

    if overrides:
        layers.append(OmegaConf.from_dotlist(list(overrides)))

    merged = OmegaConf.merge(*layers)
    config: BuildConfig = OmegaConf.to_object(merged)

    if config.root is None:
        config.root = str(root)
    else:
        config.root = str((root / config.root).resolve())

    return config
