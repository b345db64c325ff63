import logging
import unittest

from logger_conf import APP_LOGGER, get_logger


class TestGetLogger(unittest.TestCase):

    def test_module_loggers_share_app_handlers(self):
        client_logger = get_logger("tmdb_client")
        explorer_logger = get_logger("explorer")
        app_logger = get_logger()

        self.assertEqual(app_logger.name, APP_LOGGER)
        self.assertIs(client_logger.parent, app_logger)
        self.assertIs(explorer_logger.parent, app_logger)
        self.assertEqual(client_logger.handlers, [])
        self.assertEqual(explorer_logger.handlers, [])
        self.assertTrue(client_logger.propagate)

    def test_handlers_attached_once(self):
        get_logger("tmdb_client")
        get_logger("explorer")
        get_logger()
        file_handlers = [h for h in get_logger().handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)

    def test_debug_reaches_app_logger(self):
        with self.assertLogs(APP_LOGGER, level="DEBUG") as captured:
            get_logger("explorer").debug("fetch emitido")
        self.assertIn("fetch emitido", captured.output[0])


if __name__ == "__main__":
    unittest.main()
