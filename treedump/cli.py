"""
Командная строка treedump: дамп дерева из JSON-документа и поиск по AutomationId
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from treedump.config import CONFIG
from treedump.dump.document import load_tree_document
from treedump.dump.models import DumpTreeMode
from treedump.dump.search import find_element_by_automation_id
from treedump.dump.walker import dump_tree
from treedump.exceptions import DocumentFormatError, TreeDumpError

logger = logging.getLogger(__name__)


def _find_spec_node(root, automation_id: str):
	"""Найти узел документа дерева по automation id (для --exclude)."""
	if root.automation_id() == automation_id:
		return root
	for child in root.children():
		found = _find_spec_node(root.adapt(child), automation_id)
		if found is not None:
			return found
	return None


def run_dump(args: argparse.Namespace) -> int:
	root = load_tree_document(Path(args.tree))

	additional_properties: list[str] = []
	mode = args.mode
	if args.profile is not None:
		profile = CONFIG.get_profile(args.profile)
		if profile is None:
			raise TreeDumpError(f'Unknown dump profile: {args.profile}')
		additional_properties.extend(profile.additional_properties)
		mode = mode or profile.mode
	additional_properties.extend(args.property or [])
	mode = mode or CONFIG.TREEDUMP_DEFAULT_MODE

	excluded_node = None
	if args.exclude:
		excluded_node = _find_spec_node(root, args.exclude)
		if excluded_node is None:
			logger.warning(f'No node with AutomationId {args.exclude!r} to exclude')

	output = dump_tree(root, excluded_node, additional_properties, mode)

	if args.output:
		Path(args.output).write_text(output + '\n', encoding='utf-8')
		logger.info(f'Dump written to {args.output}')
	else:
		print(output)
	return 0


def run_find(args: argparse.Namespace) -> int:
	snapshot_path = Path(args.snapshot)
	try:
		text = snapshot_path.read_text(encoding='utf-8')
	except OSError as e:
		raise DocumentFormatError(f'cannot read file: {e}', str(snapshot_path)) from e

	element = find_element_by_automation_id(text, args.automation_id)
	if element is None:
		print(f'AutomationId {args.automation_id!r} not found', file=sys.stderr)
		return 1
	print(json.dumps(element, indent=2, ensure_ascii=False))
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog='treedump',
		description='Детерминированные снимки деревьев объектов',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Примеры использования:
  treedump dump tree.json
  treedump dump tree.json --mode json --property Opacity --output snapshot.json
  treedump find snapshot.json btn1
        """,
	)
	subparsers = parser.add_subparsers(dest='command', required=True)

	dump_parser = subparsers.add_parser('dump', help='Снять дамп дерева из JSON-документа')
	dump_parser.add_argument('tree', help='Файл с деревом (type/name/automation_id/properties/children)')
	dump_parser.add_argument(
		'--mode',
		'-m',
		choices=[mode.value for mode in DumpTreeMode],
		default=None,
		help='Формат вывода (по умолчанию TREEDUMP_DEFAULT_MODE или text)',
	)
	dump_parser.add_argument('--property', '-p', action='append', help='Дополнительное свойство (можно повторять)')
	dump_parser.add_argument('--exclude', '-x', default=None, help='AutomationId узла, исключаемого вместе с поддеревом')
	dump_parser.add_argument('--profile', default=None, help='Имя профиля дампа из config.json')
	dump_parser.add_argument('--output', '-o', default=None, help='Записать дамп в файл вместо stdout')
	dump_parser.set_defaults(handler=run_dump)

	find_parser = subparsers.add_parser('find', help='Найти узел в JSON-дампе по AutomationId')
	find_parser.add_argument('snapshot', help='Файл JSON-дампа')
	find_parser.add_argument('automation_id', help='Искомый AutomationId')
	find_parser.set_defaults(handler=run_find)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""Главная функция"""
	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		return args.handler(args)
	except TreeDumpError as e:
		print(f'treedump: error: {e}', file=sys.stderr)
		return 2


if __name__ == '__main__':
	sys.exit(main())
