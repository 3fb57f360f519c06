from typing import Dict, List, Literal, Optional, Union

from typing_extensions import NotRequired

from det.common.typing import TypedDict, get_args

TEngine = Literal["datafusion"]
"""Transformation engines that may be named in a job"""
TFileFormat = Literal["parquet", "csv", "json"]
TWriteMode = Literal["insert_append", "insert_overwrite", "merge"]
"""How new rows interact with existing rows. Only connectors with upsert semantics use it"""

TSourceConnectorType = Literal["filesystem"]
TDestinationConnectorType = Literal["filesystem", "postgres"]

SUPPORTED_ENGINES: List[TEngine] = ["datafusion"]
FILE_FORMATS: List[TFileFormat] = list(get_args(TFileFormat))
WRITE_MODES: List[TWriteMode] = list(get_args(TWriteMode))
SOURCE_CONNECTOR_TYPES: List[TSourceConnectorType] = list(get_args(TSourceConnectorType))
DESTINATION_CONNECTOR_TYPES: List[TDestinationConnectorType] = list(
    get_args(TDestinationConnectorType)
)


class TFilesystemSource(TypedDict, total=True):
    type: Literal["filesystem"]  # noqa: A003
    format: TFileFormat  # noqa: A003
    path: str


# more source connectors (ie. postgres, s3) are added to the union below
TSourceConnector = Union[TFilesystemSource]


class TFilesystemDestination(TypedDict, total=True):
    type: Literal["filesystem"]  # noqa: A003
    name: str
    base_dir: str
    format: TFileFormat  # noqa: A003


class TPostgresDestination(TypedDict, total=True):
    type: Literal["postgres"]  # noqa: A003
    name: str
    dsn: str
    write_mode: NotRequired[Optional[TWriteMode]]
    """Connector default is used when not set"""
    schema: NotRequired[Optional[str]]


TDestinationConnector = Union[TFilesystemDestination, TPostgresDestination]


class TExtractSection(TypedDict, total=True):
    sources: Dict[str, TSourceConnector]
    """Sources by name, in document order"""


class TTransformSection(TypedDict, total=True):
    engine: TEngine
    sql_paths: List[str]
    """Transformation scripts executed in order"""


class TLoadSection(TypedDict, total=True):
    destinations: List[TDestinationConnector]


class TJobConfig(TypedDict, total=True):
    name: str
    profile: str
    extract: TExtractSection
    transform: TTransformSection
    load: TLoadSection
