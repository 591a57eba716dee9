import json

import pytest

from treedump.dump.builders import DefaultVisualTreeLogger, JsonVisualTreeLogger, logger_for_mode
from treedump.dump.models import DumpTreeMode
from treedump.exceptions import BuilderStateError


def _emit_sample(builder) -> None:
	builder.begin_node(0, 'Grid', None, True)
	builder.log_property(1, 'Width', '100', False)
	builder.begin_array(1, 'children')
	builder.begin_node(2, 'Button', None, True)
	builder.log_property(3, 'Text', '"OK"', True)
	builder.end_node(2, 'Button', None, False)
	builder.begin_node(2, 'Canvas', None, False)
	builder.end_node(2, 'Canvas', None, True)
	builder.end_array(1, 'children')
	builder.end_node(0, 'Grid', None, True)


def test_logger_for_mode() -> None:
	assert isinstance(logger_for_mode(DumpTreeMode.PLAIN_TEXT), DefaultVisualTreeLogger)
	assert isinstance(logger_for_mode(DumpTreeMode.STRUCTURED), JsonVisualTreeLogger)


def test_json_builder_renders_valid_json() -> None:
	builder = JsonVisualTreeLogger()
	_emit_sample(builder)
	assert json.loads(builder.render()) == {
		'Type': 'Grid',
		'Width': 100,
		'children': [{'Type': 'Button', 'Text': 'OK'}, {'Type': 'Canvas'}],
	}


def test_text_builder_layout() -> None:
	builder = DefaultVisualTreeLogger()
	_emit_sample(builder)
	assert builder.render().splitlines() == [
		'[Grid]',
		'  Width=100',
		'  children:',
		'    [Button]',
		'      Text="OK"',
		'    [Canvas]',
	]


def test_json_builder_escapes_type_names() -> None:
	builder = JsonVisualTreeLogger()
	builder.begin_node(0, 'Generic<"T">', None, False)
	builder.end_node(0, 'Generic<"T">', None, True)
	assert json.loads(builder.render()) == {'Type': 'Generic<"T">'}


def test_render_is_idempotent_and_final() -> None:
	builder = DefaultVisualTreeLogger()
	builder.begin_node(0, 'Grid', None, False)
	builder.end_node(0, 'Grid', None, True)
	first = builder.render()
	assert builder.render() == first
	assert str(builder) == first
	with pytest.raises(BuilderStateError):
		builder.begin_node(0, 'Grid', None, False)


def test_empty_builder_renders_empty_string() -> None:
	assert JsonVisualTreeLogger().render() == ''
