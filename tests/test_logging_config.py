import io
import logging

import pytest

from treedump.logging_config import setup_logging


@pytest.fixture
def restore_logging():
	root_logger = logging.getLogger()
	package_logger = logging.getLogger('treedump')
	saved = (list(root_logger.handlers), root_logger.level, list(package_logger.handlers), package_logger.level, package_logger.propagate)
	yield
	root_logger.handlers, root_logger.level = saved[0], saved[1]
	package_logger.handlers, package_logger.level, package_logger.propagate = saved[2], saved[3], saved[4]


def test_info_level_shortens_logger_names(restore_logging) -> None:
	stream = io.StringIO()
	package_logger = setup_logging(stream=stream, log_level='info', force_setup=True)
	assert package_logger.name == 'treedump'
	assert package_logger.propagate is False

	logging.getLogger('treedump.dump.walker').info('walked')
	logging.getLogger('treedump.config').info('configured')
	logging.getLogger('treedump.dump.walker').debug('hidden')
	output = stream.getvalue()
	assert 'INFO     [dump] walked' in output
	assert 'INFO     [config] configured' in output
	assert 'hidden' not in output


def test_debug_level_keeps_full_names(restore_logging) -> None:
	stream = io.StringIO()
	setup_logging(stream=stream, log_level='debug', force_setup=True)
	logging.getLogger('treedump.dump.nodes').debug('details')
	assert 'DEBUG    [treedump.dump.nodes] details' in stream.getvalue()


def test_debug_log_file(restore_logging, tmp_path) -> None:
	log_file = tmp_path / 'debug.log'
	setup_logging(stream=io.StringIO(), log_level='info', force_setup=True, debug_log_file=str(log_file))
	logging.getLogger('treedump.dump.walker').debug('to file only')
	for handler in logging.getLogger('treedump').handlers:
		handler.flush()
	assert 'to file only' in log_file.read_text(encoding='utf-8')
