"""det parses and validates ETL job descriptions.

How to parse a job:

>>> from det import parse_job_config
>>> config = parse_job_config(yaml_str)
>>> list(config["extract"]["sources"])

`load_job_config` reads the job from a file. All errors derive from `DetException`.
"""

from det.version import __version__
from det.common.exceptions import DetException
from det.config import (
    parse_job_config,
    validate_job_config,
    load_job_config,
    get_source_names,
    TJobConfig,
)

__all__ = [
    "__version__",
    "DetException",
    "parse_job_config",
    "validate_job_config",
    "load_job_config",
    "get_source_names",
    "TJobConfig",
]
