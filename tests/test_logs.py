"""
Tests for the module logger factory.
"""
import logging

from backoffice_ui.lib import logs


class TestLogger:
    def test_file_path_becomes_module_name(self):
        log = logs.logger("/srv/app/src/backoffice_ui/controller.py")
        assert log.name == "backoffice_ui.controller"

    def test_plain_names_are_kept(self):
        assert logs.logger("auth").name == "backoffice_ui.auth"

    def test_handler_lives_on_the_package_logger(self):
        log = logs.logger("registry")
        logs.logger("registry")
        assert log.handlers == []
        assert log.propagate
        root = logging.getLogger(logs.ROOT_NAME)
        assert len(root.handlers) == 1
