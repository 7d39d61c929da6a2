import unittest
from unittest.mock import patch

from bot_api.util import log


class LogTest(unittest.TestCase):

    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_info_logged_at_info_level(self, mock_logger, mock_config):
        mock_config.log_level = "info"

        result = log.i("Hello")

        self.assertEqual(result, "Hello")
        mock_logger.info.assert_called_once_with("Hello")

    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_trace_skipped_at_info_level(self, mock_logger, mock_config):
        mock_config.log_level = "info"

        result = log.t("Quiet")

        self.assertEqual(result, "Quiet")
        mock_logger.debug.assert_not_called()
        mock_logger.info.assert_not_called()

    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_trace_logged_as_debug_at_trace_level(self, mock_logger, mock_config):
        mock_config.log_level = "trace"

        log.t("Loud")

        mock_logger.debug.assert_called_once_with("Loud")

    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_warning_and_error(self, mock_logger, mock_config):
        mock_config.log_level = "info"

        log.w("Careful")
        log.e("Broken")

        mock_logger.warning.assert_called_once_with("Careful")
        mock_logger.error.assert_called_once_with("Broken")

    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_multiple_args_form_a_tree(self, mock_logger, mock_config):
        mock_config.log_level = "info"

        result = log.i("First", "Second", "Third")

        self.assertEqual(result, "First\n ├─ Second\n └─ Third")

    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_exceptions_always_logged(self, mock_logger, mock_config):
        mock_config.log_level = "error"

        log.d("Context", ValueError("boom"))

        mock_logger.debug.assert_not_called()
        mock_logger.error.assert_any_call("Message: boom")

    @patch("builtins.print")
    @patch("bot_api.util.log.config")
    @patch("bot_api.util.log.logger")
    def test_local_level_prints(self, mock_logger, mock_config, mock_print):
        mock_config.log_level = "local"

        log.t("Local")

        mock_print.assert_called_once_with("[T] Local")
        mock_logger.debug.assert_not_called()
