import logging

import pytest

from orbit_calc.core.logging_utils import TableWriter, setup_logging


def test_table_writer_flushes_on_close(tmp_path):
    path = tmp_path / "table.csv"
    with TableWriter(path, ["a", "b"], flush_threshold=2) as writer:
        writer.write_row([1.0, 2.5])
        writer.write_row([3, 1e-12])
        writer.write_row([0.1, 0.2])
    assert writer.rows_written == 3
    assert path.read_text(encoding="utf-8").splitlines() == ["a,b", "1,2.5", "3,1e-12", "0.1,0.2"]


def test_table_writer_rejects_wrong_width(tmp_path):
    with pytest.raises(ValueError):
        with TableWriter(tmp_path / "t.csv", ["a", "b"]) as writer:
            writer.write_row([1.0])


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(logging.DEBUG, log_file)
    package_logger = logging.getLogger("orbit_calc")
    try:
        logging.getLogger("orbit_calc.test").warning("hello %s", "orbit")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello orbit" in log_file.read_text(encoding="utf-8")
        assert len(package_logger.handlers) == 2

        setup_logging(logging.INFO)
        assert len(package_logger.handlers) == 1
    finally:
        for handler in package_logger.handlers:
            handler.close()
        package_logger.handlers.clear()
