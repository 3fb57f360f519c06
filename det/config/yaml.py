"""Parses and validates job configuration documents written in YAML.

The job describes where data is extracted from, which engine and SQL scripts transform it and
where the results are loaded:

    name: orders
    profile: dev
    extract:
      sources:
        orders:
          type: filesystem
          format: parquet
          path: data/orders.parquet
    transform:
      engine: datafusion
      sql_paths:
        - sql/clean_orders.sql
    load:
      destinations:
        - type: postgres
          name: warehouse
          dsn: postgresql://loader@localhost/dwh
          write_mode: merge
"""
import os
from typing import List

import yaml

from det.common import logger
from det.common.exceptions import DictValidationException
from det.common.typing import TFileOrPath
from det.common.validation import validate_dict
from det.common.yaml import get_error_position, load_yaml
from det.common.configuration.exceptions import ConfigFileNotFoundException
from det.config.exceptions import (
    JobConfigStructureException,
    NoDestinationsException,
    NoSourcesException,
    UnsupportedEngineException,
)
from det.config.typing import SUPPORTED_ENGINES, TJobConfig


def parse_job_config(yaml_str: str) -> TJobConfig:
    """Decodes `yaml_str` into job configuration and validates it.

    Raises:
        JobConfigStructureException: document is not valid YAML or does not match the job schema
        UnsupportedEngineException: transform engine is not supported
        NoSourcesException: extract section has no sources
        NoDestinationsException: load section has no destinations
    """
    try:
        doc = load_yaml(yaml_str)
    except yaml.YAMLError as exc:
        position = get_error_position(exc)
        line, column = position if position else (None, None)
        raise JobConfigStructureException(
            f"Job configuration is not a valid YAML document: {exc}", exc, line, column
        ) from exc

    if not isinstance(doc, dict):
        raise JobConfigStructureException(
            "Job configuration must be a mapping but document decoded into"
            f" {type(doc).__name__}"
        )
    try:
        validate_dict(TJobConfig, doc, ".")
    except DictValidationException as exc:
        raise JobConfigStructureException(
            f"Job configuration does not match the schema: {exc}", exc
        ) from exc

    config: TJobConfig = doc  # type: ignore[assignment]
    validate_job_config(config)
    return config


def validate_job_config(config: TJobConfig) -> None:
    """Runs semantic checks on structurally valid job configuration. The first failed check raises."""
    engine = config["transform"]["engine"]
    if engine not in SUPPORTED_ENGINES:
        raise UnsupportedEngineException(engine, SUPPORTED_ENGINES)
    if not config["extract"]["sources"]:
        raise NoSourcesException(config["name"])
    if not config["load"]["destinations"]:
        raise NoDestinationsException(config["name"])


def load_job_config(path: TFileOrPath) -> TJobConfig:
    """Reads job configuration from file at `path` and parses it with `parse_job_config`"""
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise ConfigFileNotFoundException(path)
    logger.debug(f"Loading job configuration from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            yaml_str = f.read()
    except UnicodeDecodeError as exc:
        raise JobConfigStructureException(
            f"Job configuration in {path} is not a valid UTF-8 text: {exc}", exc
        ) from exc
    config = parse_job_config(yaml_str)
    logger.info(
        f"Job {config['name']} with profile {config['profile']} loaded from {path} with"
        f" {len(config['extract']['sources'])} source(s) and"
        f" {len(config['load']['destinations'])} destination(s)"
    )
    return config


def get_source_names(config: TJobConfig) -> List[str]:
    """Returns source names in the order they were declared in the document"""
    return list(config["extract"]["sources"].keys())
