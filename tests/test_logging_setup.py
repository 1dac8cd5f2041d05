import logging

from huecat.logging_setup import configure_logging, get_logger


def test_single_handler_on_named_logger():
    logger = configure_logging()
    configure_logging()
    assert logger is get_logger()
    assert logger.name == "huecat"
    assert len(logger.handlers) == 1


def test_levels():
    assert configure_logging(environ={}).level == logging.WARNING
    assert configure_logging(verbose=True, environ={}).level == logging.DEBUG
    assert configure_logging(environ={"HUECAT_LOG_LEVEL": "info"}).level == logging.INFO
    assert configure_logging(environ={"HUECAT_LOG_LEVEL": "bogus"}).level == logging.WARNING
    configure_logging(environ={})


def test_messages_carry_no_unrendered_fields(caplog):
    logger = configure_logging(verbose=True, environ={})
    with caplog.at_level(logging.DEBUG, logger="huecat"):
        logger.debug("rendering")
    configure_logging(environ={})
    assert [record.getMessage() for record in caplog.records] == ["rendering"]
    assert not hasattr(caplog.records[0], "event")
