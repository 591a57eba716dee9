from treedump.dump.filter import DEFAULT_PROPERTY_ALLOW_LIST, PropertyFilter
from treedump.dump.nodes import MappingNode


def test_allow_list_membership() -> None:
	property_filter = PropertyFilter()
	assert property_filter.should_visit_property('Width')
	assert property_filter.should_visit_property('Text')
	assert not property_filter.should_visit_property('Opacity')


def test_additional_properties_are_appended() -> None:
	property_filter = PropertyFilter(['Opacity', 'Width'])
	assert property_filter.should_visit_property('Opacity')
	assert property_filter.property_name_allow_list[: len(DEFAULT_PROPERTY_ALLOW_LIST)] == DEFAULT_PROPERTY_ALLOW_LIST
	assert property_filter.property_name_allow_list[-2:] == ['Opacity', 'Width']


def test_value_filter() -> None:
	property_filter = PropertyFilter()
	assert property_filter.should_visit_property_value('100')
	assert property_filter.should_visit_property_value('[NULL]')
	assert property_filter.should_visit_property_value('null')
	assert not property_filter.should_visit_property_value('')
	assert not property_filter.should_visit_property_value(None)
	assert not property_filter.should_visit_property_value('NaN')
	assert not property_filter.should_visit_property_value('Exception when reading Text: boom')


def test_value_filter_looks_inside_json_quotes() -> None:
	property_filter = PropertyFilter()
	assert not property_filter.should_visit_property_value('""')
	assert not property_filter.should_visit_property_value('"Exception when reading Text: boom"')
	assert property_filter.should_visit_property_value('"An Exception in the middle"')


def test_name_value_rules() -> None:
	property_filter = PropertyFilter(name_tag_prefix='<reacttag>:')
	assert property_filter.should_visit_name_value('okButton', 'okButton')
	assert not property_filter.should_visit_name_value('', '')
	assert not property_filter.should_visit_name_value(None, '[NULL]')
	assert not property_filter.should_visit_name_value('<reacttag>:12', '<reacttag>:12')


def test_node_gate_uses_element_name() -> None:
	property_filter = PropertyFilter()
	assert property_filter.should_visit_properties_for_node(MappingNode({'Type': 'Grid', 'Name': 'root'}))
	assert not property_filter.should_visit_properties_for_node(MappingNode({'Type': 'ScrollBar', 'Name': 'VerticalScrollBar'}))
	assert not property_filter.should_visit_properties_for_node(MappingNode({'Type': 'Rectangle', 'Name': 'ScrollBarSeparator'}))
	assert not property_filter.should_visit_properties_for_node(None)


def test_node_gate_custom_names() -> None:
	property_filter = PropertyFilter(excluded_node_names=['Decoration'])
	assert property_filter.should_visit_properties_for_node(MappingNode({'Type': 'ScrollBar', 'Name': 'VerticalScrollBar'}))
	assert not property_filter.should_visit_properties_for_node(MappingNode({'Type': 'Border', 'Name': 'Decoration'}))
