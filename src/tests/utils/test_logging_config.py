import logging
import unittest

from inkline.sketch.utils.logging_config import LoggingConfig


class TestLoggingConfig(unittest.TestCase):
    def tearDown(self):
        LoggingConfig.teardown()

    def test_setup_is_idempotent(self):
        logger = logging.getLogger("inkline")
        before = len(logger.handlers)
        LoggingConfig.setup_logging(logging.DEBUG)
        LoggingConfig.setup_logging(logging.DEBUG)
        self.assertEqual(len(logger.handlers), before + 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_teardown_removes_handler(self):
        logger = logging.getLogger("inkline")
        before = len(logger.handlers)
        LoggingConfig.setup_logging()
        LoggingConfig.teardown()
        self.assertEqual(len(logger.handlers), before)

    def test_module_loggers_propagate_to_package_logger(self):
        LoggingConfig.setup_logging(logging.DEBUG)
        with self.assertLogs("inkline", level="DEBUG") as captured:
            from inkline.sketch.interaction.history import ActionHistory
            from inkline.sketch.interaction.actions import FilledCircleAction
            history = ActionHistory()
            history.append(FilledCircleAction(1))
            history.undo()
        self.assertTrue(any("Undo" in line for line in captured.output))


if __name__ == '__main__':
    unittest.main()
