import json
from typing import Any

from treedump.dump.builders.base import VisualTreeLogger


class JsonVisualTreeLogger(VisualTreeLogger):
	"""Формат JSON: объект на узел с полем Type, полями свойств и массивом children."""

	def begin_node(self, depth: int, type_name: str, node: Any, has_properties: bool) -> None:
		self._append(depth, '{')
		self._append(depth + 1, f'"Type": {json.dumps(type_name)}' + (',' if has_properties else ''))

	def log_property(self, depth: int, name: str, value: str, is_last: bool) -> None:
		self._append(depth, f'{json.dumps(name)}: {value}' + ('' if is_last else ','))

	def begin_array(self, depth: int, name: str) -> None:
		self._append(depth, f'{json.dumps(name)}: [')

	def end_array(self, depth: int, name: str) -> None:
		self._append(depth, ']')

	def end_node(self, depth: int, type_name: str, node: Any, is_last: bool) -> None:
		self._append(depth, '}' + ('' if is_last else ','))
