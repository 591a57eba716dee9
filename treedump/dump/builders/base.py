# @file purpose: Контракт построителя вывода, общий для текстового и JSON-формата

from abc import ABC, abstractmethod
from typing import Any

from treedump.exceptions import BuilderStateError


class VisualTreeLogger(ABC):
	"""Накопитель вложенного представления узлов, свойств и массивов детей.

	События должны приходить в порядке обхода: begin_node, log_property*,
	[begin_array, (узлы)*, end_array], end_node. Флаги is_last и has_properties
	управляют только пунктуацией и в вывод не попадают.
	"""

	indent_unit = '  '

	def __init__(self):
		self._lines: list[str] = []
		self._rendered: str | None = None

	def _indent(self, depth: int) -> str:
		return self.indent_unit * depth

	def _append(self, depth: int, text: str) -> None:
		if self._rendered is not None:
			raise BuilderStateError(f'{type(self).__name__} already rendered')
		self._lines.append(self._indent(depth) + text)

	@abstractmethod
	def begin_node(self, depth: int, type_name: str, node: Any, has_properties: bool) -> None: ...

	@abstractmethod
	def log_property(self, depth: int, name: str, value: str, is_last: bool) -> None: ...

	@abstractmethod
	def begin_array(self, depth: int, name: str) -> None: ...

	@abstractmethod
	def end_array(self, depth: int, name: str) -> None: ...

	@abstractmethod
	def end_node(self, depth: int, type_name: str, node: Any, is_last: bool) -> None: ...

	def render(self) -> str:
		"""Собрать документ; повторный вызов возвращает ту же строку."""
		if self._rendered is None:
			self._rendered = '\n'.join(self._lines)
		return self._rendered

	def __str__(self) -> str:
		return self.render()
