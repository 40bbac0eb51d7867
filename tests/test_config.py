import pytest

from simplelogging import (
    WARNING,
    ConfigLoader,
    ConfigLoaderException,
    ConsoleWriter,
    FileWriter,
    LoggerSettings,
    LogSettings,
    StringLogFormatter,
    ValidationException,
    build_logger,
    configure,
)
from simplelogging.config.loader import parse_bool
from simplelogging.config.validators import validate_choice, validate_not_empty, validate_type
from simplelogging.constants import DEFAULT_TEMPLATE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SIMPLELOGGING_DEBUG", "SIMPLELOGGING_SANDBOX",
                "SIMPLELOGGING_PROGRAM_NAME", "SIMPLELOGGING_CONSOLE_ANSI"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    def _write(content):
        path = tmp_path / "simplelogging.yaml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


class TestValidators:
    def test_validate_choice(self):
        validate_choice("console", {"console", "file"}, "writer")
        with pytest.raises(ValidationException) as exc_info:
            validate_choice("socket", {"console", "file"}, "writer")
        assert exc_info.value.details["valid_choices"] == ["console", "file"]

    def test_validate_not_empty(self):
        with pytest.raises(ValidationException):
            validate_not_empty("", "program_name")

    def test_validate_type_is_strict(self):
        validate_type(None, bool, "debug_mode")
        with pytest.raises(ValidationException):
            validate_type("true", bool, "debug_mode")


class TestModels:
    def test_logger_defaults(self):
        settings = LoggerSettings()

        assert settings.writer == "console"
        assert settings.formatter == "default"
        assert settings.default_level == "INFO"

    def test_template_requires_template_formatter(self):
        with pytest.raises(ValidationException):
            LoggerSettings(template="%msg%")

        assert LoggerSettings(formatter="template", template="%msg%").template == "%msg%"

    def test_file_writer_requires_path(self):
        with pytest.raises(ValidationException):
            LoggerSettings(writer="file")

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            LoggerSettings(default_level="TRACE")

    def test_from_dict_ignores_unknown_keys(self):
        settings = LogSettings.from_dict({"program_name": "Demo", "unknown": 1})

        assert settings.program_name == "Demo"
        assert settings.loggers is None

    def test_from_dict_builds_logger_settings(self, tmp_path):
        settings = LogSettings.from_dict({
            "loggers": [{"writer": "file", "path": str(tmp_path / "app.log")}],
        })

        assert settings.loggers[0].path == tmp_path / "app.log"

    def test_from_dict_rejects_wrong_types(self):
        with pytest.raises(ValidationException):
            LogSettings.from_dict({"debug_mode": "yes"})


class TestConfigLoader:
    @pytest.mark.parametrize("raw, expected", [("1", True), (" TRUE ", True), ("on", True), ("0", False), ("nope", False)])
    def test_parse_bool(self, raw, expected):
        assert parse_bool(raw) is expected

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = ConfigLoader.load(tmp_path / "missing.yaml")

        assert settings == LogSettings()

    def test_loads_yaml(self, config_file):
        path = config_file(
            "program_name: Demo\n"
            "debug_mode: true\n"
            "class_names:\n"
            "  app.Worker: Worker\n"
            "loggers:\n"
            "  - writer: console\n"
            "    formatter: template\n"
            "    template: '%level% %msg%'\n"
        )

        settings = ConfigLoader.load(path)

        assert settings.program_name == "Demo"
        assert settings.debug_mode is True
        assert settings.class_names == {"app.Worker": "Worker"}
        assert settings.loggers[0].template == "%level% %msg%"

    def test_default_filename_in_cwd(self, config_file, monkeypatch, tmp_path):
        config_file("program_name: FromCwd\n")
        monkeypatch.chdir(tmp_path)

        assert ConfigLoader.load().program_name == "FromCwd"

    def test_env_overrides_file(self, config_file, monkeypatch):
        path = config_file("program_name: Demo\ndebug_mode: false\n")
        monkeypatch.setenv("SIMPLELOGGING_DEBUG", "1")
        monkeypatch.setenv("SIMPLELOGGING_PROGRAM_NAME", "Env")
        monkeypatch.setenv("SIMPLELOGGING_SANDBOX", "off")

        settings = ConfigLoader.load(path)

        assert settings.debug_mode is True
        assert settings.program_name == "Env"
        assert settings.sandbox_mode is False

    def test_invalid_yaml(self, config_file):
        path = config_file("loggers: [unclosed\n")

        with pytest.raises(ConfigLoaderException):
            ConfigLoader.load(path)

    def test_root_must_be_mapping(self, config_file):
        path = config_file("- a\n- b\n")

        with pytest.raises(ConfigLoaderException) as exc_info:
            ConfigLoader.load(path)
        assert exc_info.value.details == {"got": "list"}

    def test_validation_errors_are_wrapped(self, config_file):
        path = config_file("loggers:\n  - writer: socket\n")

        with pytest.raises(ConfigLoaderException) as exc_info:
            ConfigLoader.load(path)
        assert isinstance(exc_info.value.cause, ValidationException)

    def test_unknown_level_is_wrapped(self, config_file):
        path = config_file("loggers:\n  - default_level: TRACE\n")

        with pytest.raises(ConfigLoaderException):
            ConfigLoader.load(path)


class TestBuilder:
    def test_build_console_logger(self, context):
        logger = build_logger(LoggerSettings(default_level="warning", initiation_message=None), context)

        assert isinstance(logger.pipeline.writer, ConsoleWriter)
        assert logger.default_level is WARNING
        assert logger.initiation_message is None

    def test_template_defaults_to_default_template(self, context):
        logger = build_logger(LoggerSettings(formatter="template"), context)

        assert isinstance(logger.pipeline.formatter, StringLogFormatter)
        assert logger.pipeline.formatter.template == DEFAULT_TEMPLATE

    def test_build_file_logger_writes(self, context, tmp_path):
        path = tmp_path / "logs" / "app.log"
        settings = LoggerSettings(
            writer="file", path=path, formatter="template", template="%level%|%msg%",
            ansi=False, initiation_message=None,
        )
        logger = build_logger(settings, context)

        logger.info("hello")
        logger.pipeline.writer.close()

        assert isinstance(logger.pipeline.writer, FileWriter)
        assert path.read_text(encoding="utf-8") == "INFO|hello\n"

    def test_configure_applies_settings(self, context):
        settings = LogSettings(
            program_name="Demo",
            sandbox_mode=True,
            class_names={"app.Worker": "Worker"},
            loggers=[LoggerSettings(), LoggerSettings(formatter="template")],
        )

        result = configure(settings, context=context)

        assert result is context
        assert context.program_name == "Demo"
        assert context.sandbox_mode is True
        assert context.class_name("app.Worker") == "Worker"
        assert len(context.loggers) == 2

    def test_configure_keeps_loggers_when_not_given(self, context):
        context.add_logger(build_logger(LoggerSettings(), context))

        configure(LogSettings(program_name="Demo"), context=context)

        assert len(context.loggers) == 1

    def test_configure_from_path(self, config_file, context):
        path = config_file("program_name: Demo\nconsole_ansi: true\n")

        configure(path, context=context)

        assert context.program_name == "Demo"
        assert context.console_ansi is True

    def test_configure_defaults_to_process_context(self, config_file):
        from simplelogging import get_context

        path = config_file("program_name: Processo\n")

        configure(path)

        assert get_context().program_name == "Processo"
