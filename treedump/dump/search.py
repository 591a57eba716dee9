# @file purpose: Поиск узла по AutomationId в готовом JSON-дампе

import json
from typing import Any

from treedump.exceptions import DocumentFormatError


def find_element_by_automation_id(document: dict[str, Any] | str, automation_id: str) -> dict[str, Any] | None:
	"""Найти первый (в глубину) объект, у которого AutomationId равен `automation_id`.

	Args:
		document: Разобранный JSON-дамп или его текст
		automation_id: Искомый идентификатор

	Returns:
		Объект узла или None
	"""
	if isinstance(document, str):
		try:
			document = json.loads(document)
		except json.JSONDecodeError as e:
			raise DocumentFormatError(f'invalid JSON snapshot: {e}') from e
	if not isinstance(document, dict):
		return None

	if document.get('AutomationId') == automation_id:
		return document
	for child in document.get('children') or []:
		element = find_element_by_automation_id(child, automation_id) if isinstance(child, dict) else None
		if element is not None:
			return element
	return None
