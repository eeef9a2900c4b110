import logging

import pytest
from docstore import config, logger, Store, ClassData, ProtocolData


@pytest.fixture
def fresh_logger(tmp_path, monkeypatch):
    """Reinitialize the logger into tmp_path, and reset it afterwards."""
    monkeypatch.setattr(config, 'LOG_DIR', tmp_path)
    _reset_logger()
    yield tmp_path
    _reset_logger()


def _reset_logger():
    docstore_logger = logging.getLogger("DocStore")
    for handler in docstore_logger.handlers:
        handler.close()
    docstore_logger.handlers.clear()
    logger._logger_initialized = False


class TestLogger:
    def test_get_logger_returns_named_logger(self):
        assert logger.get_logger().name == "DocStore"

    def test_get_logger_returns_same_instance(self):
        assert logger.get_logger() is logger.get_logger()

    def test_log_file_is_created(self):
        logger.info("log file check")
        assert logger._get_log_path().exists()

    def test_duplicate_registration_is_logged_as_error(self):
        store = Store()
        store.register_class(ClassData("LoggedWidget"))
        store.register_class(ClassData("LoggedWidget"))
        content = logger._get_log_path().read_text(encoding='utf-8')
        assert "[ERROR   ]" in content
        assert "Duplicate registration in classes: LoggedWidget" in content

    def test_registration_is_logged_at_debug_level(self):
        Store().register_protocol(ProtocolData("LoggedProtocol"))
        content = logger._get_log_path().read_text(encoding='utf-8')
        assert "Registered in protocols: LoggedProtocol" in content


class TestLoggerInitialization:
    def test_log_file_written_to_configured_dir(self, fresh_logger):
        logger.info("configured dir check")
        log_path = fresh_logger / config.LOG_FILENAME
        assert logger._get_log_path() == log_path
        assert "configured dir check" in log_path.read_text(encoding='utf-8')

    def test_existing_log_is_rotated(self, fresh_logger):
        (fresh_logger / config.LOG_FILENAME).write_text("previous run\n", encoding='utf-8')
        logger.info("current run")

        rotated = list(fresh_logger.glob("DocStore_*.log"))
        assert len(rotated) == 1
        assert rotated[0].read_text(encoding='utf-8') == "previous run\n"
        content = (fresh_logger / config.LOG_FILENAME).read_text(encoding='utf-8')
        assert "previous run" not in content
        assert "current run" in content

    def test_no_rotation_without_existing_log(self, fresh_logger):
        logger.info("first run")
        assert list(fresh_logger.glob("DocStore_*.log")) == []

    def test_release_level_only_writes_warnings(self, fresh_logger, monkeypatch):
        monkeypatch.setattr(config, 'CURRENT_LOG_LEVEL', config.LogLevel.RELEASE)
        logger.debug("hidden debug")
        logger.info("hidden info")
        logger.warning("visible warning")

        assert logger.get_logger().handlers[0].level == logging.WARNING
        content = (fresh_logger / config.LOG_FILENAME).read_text(encoding='utf-8')
        assert "hidden debug" not in content
        assert "hidden info" not in content
        assert "visible warning" in content

    def test_debug_level_writes_debug_messages(self, fresh_logger):
        logger.debug("visible debug")
        assert logger.get_logger().handlers[0].level == logging.DEBUG
        assert "visible debug" in (fresh_logger / config.LOG_FILENAME).read_text(encoding='utf-8')

    def test_reinitialization_closes_previous_handler(self, fresh_logger):
        logger.info("first")
        previous = logger.get_logger().handlers[0]
        logger._logger_initialized = False
        logger.info("second")
        assert previous.stream is None
        assert len(logger.get_logger().handlers) == 1
        assert logger.get_logger().handlers[0] is not previous


class TestLoggerHelpers:
    def test_warning_helper(self, fresh_logger):
        logger.warning("careful now")
        content = (fresh_logger / config.LOG_FILENAME).read_text(encoding='utf-8')
        assert "[WARNING ]" in content
        assert "careful now" in content

    def test_exception_helper_includes_traceback(self, fresh_logger):
        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("operation failed")
        content = (fresh_logger / config.LOG_FILENAME).read_text(encoding='utf-8')
        assert "operation failed" in content
        assert "Traceback" in content
        assert "ValueError: boom" in content

    def test_log_format_includes_location(self, fresh_logger):
        logger.info("location check")
        content = (fresh_logger / config.LOG_FILENAME).read_text(encoding='utf-8')
        assert "[logger:info:" in content


class TestLogDirConfig:
    def test_env_var_selects_log_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCSTORE_LOG_DIR", str(tmp_path))
        assert config.default_log_dir() == tmp_path

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DOCSTORE_LOG_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert config.default_log_dir().resolve() == tmp_path.resolve()
