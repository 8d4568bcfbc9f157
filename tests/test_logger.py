import logging
from concurrent.futures import Future
from core.logger import init_logger
from geometry.mesh import load_mesh_shapes

def test_init_logger_level_reaches_module_loggers():
    init_logger("ERROR")
    assert not logging.getLogger("geometry.mesh").isEnabledFor(logging.INFO)
    init_logger("debug")
    assert logging.getLogger("geometry.mesh").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("geometry.world").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("core.utils").isEnabledFor(logging.DEBUG)

def test_init_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("RAYHIT_LOG_LEVEL", "ERROR")
    init_logger()
    mesh_logger = logging.getLogger("geometry.mesh")
    assert mesh_logger.isEnabledFor(logging.ERROR)
    assert not mesh_logger.isEnabledFor(logging.WARNING)

def test_init_logger_unknown_level_falls_back():
    assert init_logger("chatty").level == logging.WARNING
    assert not logging.getLogger("geometry.mesh").isEnabledFor(logging.INFO)

def test_mesh_failure_is_logged(caplog):
    init_logger("WARNING")
    future = Future()
    load_mesh_shapes(future, None, False, [])
    with caplog.at_level(logging.ERROR, logger="geometry.mesh"):
        future.set_exception(ValueError("broken file"))
    assert "broken file" in caplog.text
