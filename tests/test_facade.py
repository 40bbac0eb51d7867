import pytest

from simplelogging import (
    DEBUG,
    INFO,
    WARNING,
    BoundLogger,
    Log,
    LogContext,
    Logger,
    StringLogFormatter,
    get_context,
    log,
    reset_context,
)
from tests.conftest import FailingWriter, RecordingWriter


def _logger(context, template="%classname%|%msg%"):
    writer = RecordingWriter()
    logger = Logger.create(StringLogFormatter(template, context), writer, context=context)
    logger.initiation_message = None
    return logger, writer


@pytest.fixture
def facade(context):
    return Log(context)


class TestBroadcast:
    def test_every_logger_receives_in_order(self, facade, context):
        first, first_writer = _logger(context)
        second, second_writer = _logger(context, "%level%:%msg%")
        facade.loggers = [first, second]

        facade.log("hello", WARNING)

        assert first_writer.lines == ["|hello"]
        assert second_writer.lines == ["WARNING:hello"]

    def test_each_logger_applies_its_own_defaults(self, facade, context):
        first, first_writer = _logger(context, "%level%")
        second, second_writer = _logger(context, "%level%")
        second.default_level = WARNING
        facade.loggers = [first, second]

        facade.log("hello")

        assert first_writer.lines == ["INFO"]
        assert second_writer.lines == ["WARNING"]

    def test_failure_aborts_remaining_loggers(self, facade, context):
        broken = Logger.create(StringLogFormatter("%msg%", context), FailingWriter(), context=context)
        broken.initiation_message = None
        healthy, healthy_writer = _logger(context)
        facade.loggers = [broken, healthy]

        with pytest.raises(RuntimeError, match="writer quebrado"):
            facade.info("hello")

        assert healthy_writer.lines == []

    def test_print_stack_trace_broadcast(self, facade, context):
        first, first_writer = _logger(context)
        second, second_writer = _logger(context)
        facade.loggers = [first, second]
        error = ValueError("boom")

        facade.print_stack_trace(error)

        assert first_writer.stack_traces == [error]
        assert second_writer.stack_traces == [error]

    def test_debug_shortcut_suppressed_until_debug_mode(self, facade, context):
        logger, writer = _logger(context)
        facade.add_logger(logger)

        facade.debug("hidden")
        facade.debug_mode = True
        facade.log("shown", DEBUG)

        assert writer.lines == ["Logger|Program runs in debug mode!", "|shown"]


class TestRegistry:
    def test_lazy_seed_with_console_logger(self, capsys):
        context = LogContext()
        facade = Log(context)

        facade.info("hello")

        assert len(facade.loggers) == 1
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("-------------------------------")
        assert out[1].endswith("] > hello")

    def test_no_seed_when_disabled(self, facade):
        assert facade.loggers == []

    def test_add_logger_seeds_first(self):
        facade = Log(LogContext())
        logger, _ = _logger(facade.context)

        facade.add_logger(logger)

        assert len(facade.loggers) == 2
        assert facade.loggers[1] is logger

    def test_remove_logger(self, facade, context):
        logger, _ = _logger(context)
        facade.add_logger(logger)

        facade.remove_logger(logger)
        facade.remove_logger(logger)

        assert facade.loggers == []

    def test_loggers_setter_copies_list(self, facade, context):
        logger, _ = _logger(context)
        loggers = [logger]

        facade.loggers = loggers
        loggers.clear()

        assert facade.loggers == [logger]


class TestModes:
    def test_properties_write_through_to_context(self, facade, context):
        facade.debug_mode = True
        facade.sandbox_mode = True
        facade.program_name = "Demo"
        facade.console_ansi = True

        assert (context.debug_mode, context.sandbox_mode, context.program_name, context.console_ansi) == (
            True, True, "Demo", True,
        )

    def test_set_settings(self, facade):
        facade.set_settings(True, False, "Demo")

        assert facade.sandbox_mode is True
        assert facade.debug_mode is False
        assert facade.program_name == "Demo"

    def test_scope_restores_values(self, facade):
        with facade.scope(debug_mode=True, program_name="Temp"):
            assert facade.debug_mode is True
            assert facade.program_name == "Temp"

        assert facade.debug_mode is False
        assert facade.program_name == "Program"


class Foo:
    pass


class TestTranslations:
    def test_register_query_remove(self, facade, context):
        logger, writer = _logger(context)
        facade.add_logger(logger)

        facade.register_class_name("com.example.Foo", "Foo")
        facade.log("one", source="com.example.Foo")
        facade.remove_class_name("com.example.Foo")
        facade.log("two", source="com.example.Foo")

        assert writer.lines == ["Foo|one", "|two"]
        assert facade.class_name("com.example.Foo") is None

    def test_register_by_caller_object(self, facade):
        facade.register_class_name(Foo(), "Foo")

        assert facade.class_name(Foo) == "Foo"
        assert facade.class_name_translations == {f"{__name__}.Foo": "Foo"}

    def test_translations_view_is_a_copy(self, facade):
        facade.class_name_translations["x"] = "y"

        assert facade.class_name("x") is None

    def test_bind(self, facade, context):
        logger, writer = _logger(context)
        facade.add_logger(logger)
        facade.register_class_name(Foo, "Foo")

        bound = facade.bind(Foo)
        bound.warning("bound")

        assert isinstance(bound, BoundLogger)
        assert writer.lines == ["Foo|bound"]


class TestProcessFacade:
    def test_module_level_log_follows_process_context(self, capsys):
        context = get_context()
        context.seed_default_logger = False
        logger, writer = _logger(context)
        log.add_logger(logger)

        log.log("hello", INFO)

        assert writer.lines == ["|hello"]
        assert capsys.readouterr().out == ""

    def test_reset_context_retargets_log(self):
        log.program_name = "Before"

        reset_context()

        assert log.program_name == "Program"
