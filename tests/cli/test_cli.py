import os
import shutil
from typing import Any

import pytest

from det.cli import debug
from det.cli._det import main
from det.cli.commands import describe_destination, describe_job, describe_source
from det.config import JobConfigStructureException, parse_job_config
from det.version import __version__

from tests.utils import job_case_path, load_job_case


def test_no_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == -1
    assert "validate" in capsys.readouterr().out


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as py_ex:
        main(["--version"])
    assert py_ex.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_validate(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", job_case_path("full.yml")]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "OK"
    assert lines[1] == "Job sales_mart has 3 source(s), 3 sql script(s) and 3 destination(s)"


def test_validate_invalid_job(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", job_case_path("duplicate_source.yml")]) == -1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: " in captured.err
    assert "duplicate key 'orders'" in captured.err
    assert "(line 9, column 5)" in captured.err


def test_validate_no_sources(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", job_case_path("no_sources.yml")]) == -1
    assert "has no sources" in capsys.readouterr().err


def test_missing_file(capsys: pytest.CaptureFixture[str], tmp_path: Any) -> None:
    path = os.path.join(str(tmp_path), "missing.yaml")
    assert main(["sources", path]) == -1
    assert f"Missing config file in {path}" in capsys.readouterr().err


def test_debug_raises() -> None:
    with pytest.raises(JobConfigStructureException):
        main(["--debug", "validate", job_case_path("malformed.yml")])
    assert debug.is_debug_enabled()


def test_sources_in_declaration_order(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["sources", job_case_path("full.yml")]) == 0
    assert capsys.readouterr().out.splitlines() == ["customers", "orders", "events"]


def test_show(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", job_case_path("full.yml")]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Job sales_mart (profile: prod)",
        "Sources:",
        "  customers: filesystem csv s3-mirror/customers/*.csv",
        "  orders: filesystem parquet data/raw/orders.parquet",
        "  events: filesystem json data/raw/events.jsonl",
        "Transform with datafusion:",
        "  1. sql/01_staging.sql",
        "  2. sql/02_customers.sql",
        "  3. sql/03_sales_mart.sql",
        "Destinations:",
        "  - warehouse: postgres write_mode=merge schema=mart",
        "  - reporting: postgres write_mode=default",
        "  - archive: filesystem parquet /var/lib/det/archive",
    ]
    # credentials in dsn are not displayed
    assert "loader" not in out


def test_path_from_environ(capsys: pytest.CaptureFixture[str]) -> None:
    os.environ["RUNTIME__CONFIG_FILE_PATH"] = job_case_path("minimal.yml")
    assert main(["sources"]) == 0
    assert capsys.readouterr().out.splitlines() == ["orders"]


def test_default_path(
    capsys: pytest.CaptureFixture[str], tmp_path: Any, monkeypatch: pytest.MonkeyPatch
) -> None:
    shutil.copy(job_case_path("minimal.yml"), os.path.join(str(tmp_path), "config.yaml"))
    monkeypatch.chdir(tmp_path)
    assert main(["validate"]) == 0
    assert capsys.readouterr().out.startswith("OK")


def test_invalid_log_level(capsys: pytest.CaptureFixture[str]) -> None:
    os.environ["RUNTIME__LOG_LEVEL"] = "LOUD"
    assert main(["validate", job_case_path("minimal.yml")]) == -1
    assert "log_level" in capsys.readouterr().err


def test_describe_connectors() -> None:
    config = parse_job_config(load_job_case("minimal.yml"))
    source = config["extract"]["sources"]["orders"]
    assert describe_source("orders", source) == "orders: filesystem parquet data/raw/orders.parquet"
    # connectors without format and path are listed by type only
    bucket = {"type": "s3", "bucket": "raw"}
    assert describe_source("events", bucket) == "events: s3"  # type: ignore[arg-type]
    destination = config["load"]["destinations"][0]
    assert describe_destination(destination) == "curated: filesystem csv data/curated"
    assert (
        describe_destination(
            {"type": "postgres", "name": "dwh", "dsn": "postgresql://localhost/dwh"}
        )
        == "dwh: postgres write_mode=default"
    )
    assert describe_job(config)[-1] == "  - curated: filesystem csv data/curated"


def test_validate_warns_on_no_sql_scripts(
    capsys: pytest.CaptureFixture[str], tmp_path: Any
) -> None:
    path = os.path.join(str(tmp_path), "no_sql.yaml")
    with open(path, "w", encoding="utf-8") as f:
        document = load_job_case("minimal.yml").replace("    - sql/clean_orders.sql\n", "")
        f.write(document.replace("sql_paths:\n", "sql_paths: []\n"))
    assert main(["validate", path]) == 0
    captured = capsys.readouterr()
    assert "WARNING: Job orders_daily does not run any sql scripts" in captured.err
    assert "0 sql script(s)" in captured.out


def test_validate_not_utf8(capsys: pytest.CaptureFixture[str], tmp_path: Any) -> None:
    path = os.path.join(str(tmp_path), "config.yaml")
    with open(path, "wb") as f:
        f.write(b"name: \xff\xfe\n")
    assert main(["validate", path]) == -1
    assert "is not a valid UTF-8 text" in capsys.readouterr().err
