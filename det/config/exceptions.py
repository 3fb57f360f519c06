from typing import Optional, Sequence

from det.common.exceptions import DetException, TerminalException


class JobConfigException(DetException, TerminalException):
    """Base class for all errors raised when job configuration is parsed and validated"""


class JobConfigStructureException(JobConfigException):
    """Document could not be decoded into job configuration: syntax error, missing or unknown
    field, unknown connector type or enumeration value.

    `inner_exc` holds the original decoder or validator exception. `line` and `column` (1-based)
    point to the problem in the document when the decoder reports them.
    """

    def __init__(
        self,
        msg: str,
        inner_exc: Exception = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.inner_exc = inner_exc
        self.line = line
        self.column = column
        if line is not None:
            msg = f"{msg} (line {line}, column {column})"
        super().__init__(msg)


class UnsupportedEngineException(JobConfigException):
    def __init__(self, engine: str, supported_engines: Sequence[str]) -> None:
        self.engine = engine
        self.supported_engines = supported_engines
        super().__init__(
            f"Engine {engine} is not supported. Only {', '.join(supported_engines)} may be used"
            " in the transform section."
        )


class NoSourcesException(JobConfigException):
    def __init__(self, job_name: str) -> None:
        self.job_name = job_name
        super().__init__(f"Job {job_name} has no sources configured in the extract section.")


class NoDestinationsException(JobConfigException):
    def __init__(self, job_name: str) -> None:
        self.job_name = job_name
        super().__init__(f"Job {job_name} has no destinations configured in the load section.")
