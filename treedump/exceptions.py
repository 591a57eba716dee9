"""Исключения для всех компонентов системы."""


# Базовое исключение
class TreeDumpError(Exception):
	"""Базовое исключение для ошибок, видимых вызывающему коду."""

	pass


class InvalidDumpModeError(TreeDumpError, ValueError):
	"""Исключение, возникающее при неизвестном режиме вывода."""

	def __init__(self, mode: object):
		super().__init__(f'Unknown dump mode: {mode!r}')
		self.mode = mode


class DocumentFormatError(TreeDumpError):
	"""Исключение, возникающее при невалидном документе дерева или снимка."""

	def __init__(self, message: str, source: str | None = None):
		super().__init__(message if source is None else f'{source}: {message}')
		self.source = source
		self.message = message


class BuilderStateError(TreeDumpError, RuntimeError):
	"""Событие получено построителем после вызова render()."""

	pass
