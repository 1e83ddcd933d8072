"""
Experiment configuration.

Responsibility: load config/default.yaml (or a user file) and check it.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import InvalidArgument, check_count
from .naturals import INT64_MAX

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'default.yaml'

DEFAULTS = {
    'n_grid': [10, 100, 1000, 2000],
    'hazard_n_grid': [5, 10, 20, 40],
    'max_value': INT64_MAX,
}


def load_config(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Read a YAML config and fill in defaults.

    Parameters
    ----------
    path : str or Path, optional
        Config file. Defaults to config/default.yaml.

    Returns
    -------
    dict
        Keys n_grid, hazard_n_grid (lists of counts) and max_value.

    Raises
    ------
    InvalidArgument
        If the file is not a mapping or a value is out of range.
    """
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    with open(path) as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidArgument(f"{path}: top level must be a mapping")
    unknown = set(raw) - set(DEFAULTS)
    if unknown:
        raise InvalidArgument(f"{path}: unknown keys {sorted(unknown)}")

    config = dict(DEFAULTS)
    config.update(raw)
    for key in ('n_grid', 'hazard_n_grid'):
        if not isinstance(config[key], list):
            raise InvalidArgument(f"{key} must be a list of counts")
        config[key] = [check_count(n, key) for n in config[key]]
    config['max_value'] = check_count(config['max_value'], 'max_value')
    if config['max_value'] > INT64_MAX:
        raise InvalidArgument(f"max_value must be <= {INT64_MAX}")
    return config
