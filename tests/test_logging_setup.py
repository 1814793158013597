import logging
import os
import tempfile

from beam_calc.services.logging_setup import setup_logging


def test_setup_logging_is_idempotent():
    logger = logging.getLogger("beam_calc")
    old = list(logger.handlers)
    for h in old:
        logger.removeHandler(h)

    lg = logger
    with tempfile.TemporaryDirectory() as td:
        try:
            lg = setup_logging(log_dir=td, log_name="test.log")
            n = len(lg.handlers)
            assert n == 2
            assert setup_logging(log_dir=td, log_name="test.log") is lg
            assert len(lg.handlers) == n

            logging.getLogger("beam_calc.engine.evaluate").info("mensaje de prueba")
            for h in lg.handlers:
                h.flush()
            with open(os.path.join(td, "test.log"), encoding="utf-8") as f:
                assert "mensaje de prueba" in f.read()
        finally:
            for h in list(lg.handlers):
                lg.removeHandler(h)
                h.close()
            for h in old:
                logger.addHandler(h)
