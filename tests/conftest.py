import pytest

from context_map import ContextMap


@pytest.fixture()
def ctx() -> ContextMap:
    return (
        ContextMap()
        .put("applicationName", "RecordExampleApp")
        .put("timeoutSeconds", 30)
        .put("ratio", 0.75)
        .put("enabled", True)
        .put("flags", ["A", "B", "C"])
        .put("user", {"id": 7, "name": "Hong Gildong"})
        .put("nothing", None)
    )


@pytest.fixture(autouse=True)
def _clear_converter_registry():
    # Registered converters are module-global; keep tests independent.
    from context_map import converters

    converters._converters.clear()
    yield
    converters._converters.clear()


@pytest.fixture()
def reset_logging():
    # setup_logging mutates global structlog and root logger state.
    import logging

    import structlog

    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
