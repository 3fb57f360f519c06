import logging
import os
from os import environ
from typing import Iterator

import pytest

from det.common import logger
from det.cli import debug

TESTS_ROOT = os.path.dirname(__file__)
JOB_CASES_PATH = os.path.join(TESTS_ROOT, "config", "cases")


def job_case_path(name: str) -> str:
    return os.path.join(JOB_CASES_PATH, name)


def load_job_case(name: str) -> str:
    with open(job_case_path(name), "r", encoding="utf-8") as f:
        return f.read()


@pytest.fixture(scope="function", autouse=True)
def preserve_environ() -> Iterator[None]:
    saved_environ = environ.copy()
    try:
        yield
    finally:
        environ.clear()
        environ.update(saved_environ)


@pytest.fixture(autouse=True)
def reset_logger_and_debug() -> Iterator[None]:
    yield
    # handlers keep the stream captured during the test
    logging.getLogger(logger.DET_LOGGER_NAME).handlers.clear()
    logger.LOGGER = None
    debug.disable_debug()
