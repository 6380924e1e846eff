import logging

from loguru import logger

from emojis.log import InterceptHandler


def test_stdlib_records_reach_loguru():
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    std_logger = logging.getLogger("emojis.tests.intercept")
    std_logger.addHandler(InterceptHandler())
    std_logger.setLevel(logging.DEBUG)
    std_logger.propagate = False
    try:
        std_logger.warning("hello from logging")
    finally:
        logger.remove(sink_id)
        std_logger.handlers.clear()

    assert any(message.startswith("WARNING hello from logging") for message in messages)
