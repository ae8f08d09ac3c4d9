"""
Тесты общего ядра: результаты операций, настройки и логирование.
"""

import logging

import pydantic
import pytest
from shared_kernel import (
    Failure,
    NotFound,
    Settings,
    StandardLogger,
    Success,
    ValidationError,
    setup_logging,
)
from user_management.application import RegisterUserRequest, UserApplicationService
from user_management.infrastructure import InMemoryUserRepository, UserUnitOfWork


class TestResult:
    def test_success(self):
        result = Success(42)

        assert result.is_success
        assert result.unwrap() == 42

    def test_failure(self):
        error = NotFound("нет такого")
        result = Failure(error)

        assert not result.is_success
        assert result.message == "нет такого"
        with pytest.raises(NotFound):
            result.unwrap()


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.project_name == "User Booking Platform"

    def test_values_from_environment(self):
        settings = Settings.from_env(
            {"LOG_LEVEL": "debug", "LOG_FILE": "logs/app.log", "API_VERSION": "2.0"}
        )

        assert settings.log_level == "DEBUG"
        assert settings.log_file == "logs/app.log"
        assert settings.api_version == "2.0"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="LOUD")


class TestLogging:
    def test_context_is_rendered(self, caplog):
        logger = StandardLogger("tests.platform")

        with caplog.at_level(logging.INFO, logger="tests.platform"):
            logger.info("User registered", name="Alice", age=30)

        assert "User registered [name=Alice age=30]" in caplog.text

    def test_unit_of_work_logs_rollback_at_debug(self, caplog):
        """Откат пишется в debug: предупреждение о причине пишет сервис."""
        uow = UserUnitOfWork(
            InMemoryUserRepository(), logger=StandardLogger("tests.uow")
        )

        with caplog.at_level(logging.DEBUG, logger="tests.uow"):
            with pytest.raises(ValidationError):
                with uow:
                    raise ValidationError("boom")

        records = [r for r in caplog.records if "rolled back" in r.getMessage()]
        assert [r.levelno for r in records] == [logging.DEBUG]

    def test_rejected_registration_logs_one_warning(self, caplog):
        service = UserApplicationService(
            UserUnitOfWork(InMemoryUserRepository(), logger=StandardLogger("tests.uow")),
            logger=StandardLogger("tests.users"),
        )

        with caplog.at_level(logging.DEBUG):
            service.register_user(RegisterUserRequest(name="Bob", age=15))

        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "User registration rejected" in warnings[0].getMessage()

    def test_unit_of_work_releases_lock_after_error(self):
        uow = UserUnitOfWork(InMemoryUserRepository())

        with pytest.raises(ValidationError):
            with uow:
                raise ValidationError("boom")

        # Блокировка освобождена, следующий сценарий выполняется
        with uow:
            uow.users.list()


class TestSetupLogging:
    """Тесты настройки корневого логгера."""

    @pytest.fixture
    def bare_root(self, monkeypatch):
        """Корневой логгер без обработчиков; состояние восстанавливается после теста."""
        root = logging.getLogger()
        original_level = root.level
        monkeypatch.setattr(root, "handlers", [])
        yield root
        for handler in root.handlers:
            handler.close()
        root.setLevel(original_level)

    def test_console_and_file_handlers(self, bare_root, monkeypatch, tmp_path):
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        logfile = tmp_path / "sub" / "app.log"

        setup_logging("debug", str(logfile))

        assert bare_root.level == logging.DEBUG
        assert len(bare_root.handlers) == 2
        file_handlers = [
            h for h in bare_root.handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert logfile.exists()

        logging.getLogger("tests.setup").info("hello")
        file_handlers[0].flush()
        assert "[INFO] tests.setup: hello" in logfile.read_text(encoding="utf-8")

    def test_console_only_without_logfile(self, bare_root, monkeypatch):
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        setup_logging("warning")

        assert bare_root.level == logging.WARNING
        assert len(bare_root.handlers) == 1
        assert not isinstance(bare_root.handlers[0], logging.FileHandler)

    def test_configures_only_once(self, bare_root, monkeypatch):
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        setup_logging("info")
        setup_logging("debug")

        assert bare_root.level == logging.INFO
        assert len(bare_root.handlers) == 1
