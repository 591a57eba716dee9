"""Детерминированные снимки деревьев объектов для регрессионного тестирования."""

import os
from typing import TYPE_CHECKING

from treedump.logging_config import setup_logging

# Setup logging
if os.environ.get('TREEDUMP_SETUP_LOGGING', 'true').lower() != 'false':
	from treedump.config import CONFIG

	logger = setup_logging(debug_log_file=CONFIG.TREEDUMP_DEBUG_LOG_FILE, info_log_file=CONFIG.TREEDUMP_INFO_LOG_FILE)
else:
	import logging

	logger = logging.getLogger('treedump')

# Типы для lazy imports
if TYPE_CHECKING:
	from treedump.dump.models import DumpTreeMode
	from treedump.dump.nodes import MappingNode, ObjectNode, TreeNodeAdapter
	from treedump.dump.search import find_element_by_automation_id
	from treedump.dump.walker import dump_tree

# Lazy imports mapping
_LAZY_IMPORTS = {
	'dump_tree': ('treedump.dump.walker', 'dump_tree'),
	'DumpTreeMode': ('treedump.dump.models', 'DumpTreeMode'),
	'TreeNodeAdapter': ('treedump.dump.nodes', 'TreeNodeAdapter'),
	'ObjectNode': ('treedump.dump.nodes', 'ObjectNode'),
	'MappingNode': ('treedump.dump.nodes', 'MappingNode'),
	'find_element_by_automation_id': ('treedump.dump.search', 'find_element_by_automation_id'),
}


def __getattr__(name: str):
	"""Lazy import mechanism."""
	if name in _LAZY_IMPORTS:
		module_path, attr_name = _LAZY_IMPORTS[name]
		try:
			from importlib import import_module

			module = import_module(module_path)
			attr = getattr(module, attr_name)
			globals()[name] = attr
			return attr
		except ImportError as e:
			raise ImportError(f'Failed to import {name} from {module_path}: {e}') from e
	raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
	'dump_tree',
	'DumpTreeMode',
	'TreeNodeAdapter',
	'ObjectNode',
	'MappingNode',
	'find_element_by_automation_id',
]
