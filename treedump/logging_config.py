import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from treedump.config import CONFIG


def setup_logging(stream=None, log_level=None, force_setup=False, debug_log_file=None, info_log_file=None):
	"""Настроить логирование для treedump.

	Args:
		stream: Output stream for logs (default: sys.stderr, stdout is reserved for dumps).
		log_level: Уровень логирования (по умолчанию CONFIG.TREEDUMP_LOGGING_LEVEL)
		force_setup: Force reconfiguration even if handlers already exist
		debug_log_file: Path to log file for debug level logs only
		info_log_file: Path to log file for info level logs only
	"""
	level_type = (log_level or CONFIG.TREEDUMP_LOGGING_LEVEL).lower()

	# Проверить, настроены ли уже обработчики
	if logging.getLogger().hasHandlers() and not force_setup:
		return logging.getLogger('treedump')

	# Очистить существующие обработчики
	root_logger = logging.getLogger()
	root_logger.handlers = []

	class TreeDumpFormatter(logging.Formatter):
		def __init__(self, format_string, level_value):
			super().__init__(format_string)
			self.level_value = level_value

		def format(self, log_record):
			# Сокращать имена только в режиме INFO, сохранять полные в режиме DEBUG
			if self.level_value > logging.DEBUG and isinstance(log_record.name, str) and log_record.name.startswith('treedump.'):
				name_parts = log_record.name.split('.')
				if name_parts[1] == 'dump':
					log_record.name = 'dump'
				else:
					log_record.name = name_parts[-1]
			return super().format(log_record)

	console_handler = logging.StreamHandler(stream or sys.stderr)

	if level_type == 'debug':
		effective_level = logging.DEBUG
	elif level_type == 'warning':
		effective_level = logging.WARNING
	elif level_type == 'error':
		effective_level = logging.ERROR
	else:
		effective_level = logging.INFO

	console_handler.setLevel(effective_level)
	console_handler.setFormatter(TreeDumpFormatter('%(levelname)-8s [%(name)s] %(message)s', effective_level))
	root_logger.addHandler(console_handler)

	# Добавить файловые обработчики, если указаны
	file_handler_list = []

	if debug_log_file:
		debug_file_handler = logging.FileHandler(debug_log_file, encoding='utf-8')
		debug_file_handler.setLevel(logging.DEBUG)
		debug_file_handler.setFormatter(TreeDumpFormatter('%(asctime)s - %(levelname)-8s [%(name)s] %(message)s', logging.DEBUG))
		file_handler_list.append(debug_file_handler)
		root_logger.addHandler(debug_file_handler)

	if info_log_file:
		info_file_handler = logging.FileHandler(info_log_file, encoding='utf-8')
		info_file_handler.setLevel(logging.INFO)
		info_file_handler.setFormatter(TreeDumpFormatter('%(asctime)s - %(levelname)-8s [%(name)s] %(message)s', logging.INFO))
		file_handler_list.append(info_file_handler)
		root_logger.addHandler(info_file_handler)

	# Корневой логгер - DEBUG, если включено логирование в файл debug
	final_log_level = logging.DEBUG if debug_log_file else effective_level
	root_logger.setLevel(final_log_level)

	main_logger = logging.getLogger('treedump')
	main_logger.propagate = False  # Не распространять на корневой логгер
	main_logger.handlers = []
	main_logger.addHandler(console_handler)
	for file_handler in file_handler_list:
		main_logger.addHandler(file_handler)
	main_logger.setLevel(final_log_level)

	# Заглушить логгеры сторонних библиотек
	for external_logger_name in ['pydantic', 'dotenv', 'dotenv.main']:
		external_logger = logging.getLogger(external_logger_name)
		external_logger.setLevel(logging.ERROR)
		external_logger.propagate = False

	return main_logger
