"""Обход дерева, фильтрация свойств и форматирование снимков."""

from treedump.dump.models import DumpTreeMode
from treedump.dump.nodes import MappingNode, ObjectNode, TreeNodeAdapter, adapt_node
from treedump.dump.search import find_element_by_automation_id
from treedump.dump.walker import dump_tree

__all__ = [
	'DumpTreeMode',
	'MappingNode',
	'ObjectNode',
	'TreeNodeAdapter',
	'adapt_node',
	'dump_tree',
	'find_element_by_automation_id',
]
