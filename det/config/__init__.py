from det.config.typing import (
    TJobConfig,
    TExtractSection,
    TTransformSection,
    TLoadSection,
    TSourceConnector,
    TDestinationConnector,
    TFilesystemSource,
    TFilesystemDestination,
    TPostgresDestination,
    TEngine,
    TFileFormat,
    TWriteMode,
    SUPPORTED_ENGINES,
    FILE_FORMATS,
    WRITE_MODES,
    SOURCE_CONNECTOR_TYPES,
    DESTINATION_CONNECTOR_TYPES,
)
from det.config.exceptions import (
    JobConfigException,
    JobConfigStructureException,
    UnsupportedEngineException,
    NoSourcesException,
    NoDestinationsException,
)
from det.config.yaml import (
    parse_job_config,
    validate_job_config,
    load_job_config,
    get_source_names,
)

__all__ = [
    "TJobConfig",
    "TExtractSection",
    "TTransformSection",
    "TLoadSection",
    "TSourceConnector",
    "TDestinationConnector",
    "TFilesystemSource",
    "TFilesystemDestination",
    "TPostgresDestination",
    "TEngine",
    "TFileFormat",
    "TWriteMode",
    "SUPPORTED_ENGINES",
    "FILE_FORMATS",
    "WRITE_MODES",
    "SOURCE_CONNECTOR_TYPES",
    "DESTINATION_CONNECTOR_TYPES",
    "JobConfigException",
    "JobConfigStructureException",
    "UnsupportedEngineException",
    "NoSourcesException",
    "NoDestinationsException",
    "parse_job_config",
    "validate_job_config",
    "load_job_config",
    "get_source_names",
]
