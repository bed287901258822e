"""Tests for logging setup and string case helpers."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from utils import (
    camel_to_kebab,
    camel_to_snake,
    kebab_to_camel,
    kebab_to_snake,
    kebab_to_studly,
    setup_logging,
    snake_to_camel,
    snake_to_kebab,
    snake_to_studly,
)


class TestSetupLogging:

    def test_console_only_by_default(self, restore_root_logger):
        root_logger = setup_logging()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)

    def test_rotating_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / 'wordfilter.log'
        root_logger = setup_logging({'level': 'debug', 'file': str(log_file)})

        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers)

        logging.getLogger('wordfilter.test').debug('written to file')
        for handler in root_logger.handlers:
            handler.flush()
        assert 'written to file' in log_file.read_text(encoding='utf-8')

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        assert setup_logging({'level': 'chatty'}).level == logging.INFO


@pytest.mark.parametrize('helper, text, expected', [
    (snake_to_camel, 'snake_case_name', 'snakeCaseName'),
    (snake_to_studly, 'snake_case_name', 'SnakeCaseName'),
    (camel_to_snake, 'camelCaseName', 'camel_case_name'),
    (camel_to_snake, 'HTTPServerError', 'http_server_error'),
    (camel_to_kebab, 'camelCaseName', 'camel-case-name'),
    (kebab_to_camel, 'kebab-case-name', 'kebabCaseName'),
    (kebab_to_studly, 'kebab-case-name', 'KebabCaseName'),
    (snake_to_kebab, 'snake_case_name', 'snake-case-name'),
    (kebab_to_snake, 'kebab-case-name', 'kebab_case_name'),
])
def test_case_helpers(helper, text, expected):
    assert helper(text) == expected


def test_helpers_map_lists():
    assert camel_to_snake(['fooBar', 'BazQux']) == ['foo_bar', 'baz_qux']


def test_helpers_pass_through_other_values():
    assert camel_to_snake(None) is None
    assert snake_to_camel(42) == 42
