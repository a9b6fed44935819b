import pytest

from pinyintable.lookup_table import Text
from pinyintable.properties import PropList, PropState, PropType, Property


def test_defaults():
    prop = Property("mode")
    assert prop.type == PropType.NORMAL
    assert prop.state == PropState.UNCHECKED
    assert prop.label == Text("")
    assert prop.icon == ""
    assert prop.sensitive and prop.visible
    assert len(prop.sub_props) == 0


def test_label_str_is_converted():
    prop = Property("mode", label="Chinese")
    assert prop.label == Text("Chinese")
    prop.label = Text("English")
    assert prop.label.text == "English"


def test_symbol_and_tooltip_setters():
    prop = Property("mode")
    prop.symbol = "中"
    prop.tooltip = "Switch mode"
    assert prop.symbol.text == "中"
    assert prop.tooltip.text == "Switch mode"


def test_state_rejects_unknown_value():
    prop = Property("mode", type=PropType.TOGGLE)
    prop.state = PropState.CHECKED
    assert prop.state is PropState.CHECKED
    with pytest.raises(ValueError):
        prop.state = 99


def test_key_must_be_string():
    with pytest.raises(TypeError):
        Property(None)


def test_label_rejects_other_types():
    with pytest.raises(TypeError):
        Property("mode", label=3)


def test_prop_list_keeps_order():
    props = PropList()
    first, second = Property("a"), Property("b")
    props.append(first)
    props.append(second)
    assert len(props) == 2
    assert [p.key for p in props] == ["a", "b"]
    assert props[1] is second


def test_prop_list_rejects_non_property():
    with pytest.raises(TypeError):
        PropList().append("a")


def test_sub_props_kept():
    menu = PropList()
    menu.append(Property("item"))
    prop = Property("menu", type=PropType.MENU, sub_props=menu)
    assert [p.key for p in prop.sub_props] == ["item"]