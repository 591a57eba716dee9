from typing import Any

from treedump.dump.builders.base import VisualTreeLogger


class DefaultVisualTreeLogger(VisualTreeLogger):
	"""Формат key=value.

	[Namespace.TypeName]
	  Name=root
	  children:
	    [Namespace.ChildType]
	      Width=100
	"""

	def begin_node(self, depth: int, type_name: str, node: Any, has_properties: bool) -> None:
		self._append(depth, f'[{type_name}]')

	def log_property(self, depth: int, name: str, value: str, is_last: bool) -> None:
		self._append(depth, f'{name}={value}')

	def begin_array(self, depth: int, name: str) -> None:
		self._append(depth, f'{name}:')

	def end_array(self, depth: int, name: str) -> None:
		pass

	def end_node(self, depth: int, type_name: str, node: Any, is_last: bool) -> None:
		pass
