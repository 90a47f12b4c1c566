import pytest

from gallery_ui.filters import FilterSelection
from gallery_ui.query_encoder import encode_filters, to_query_string


def test_size_only():
    assert encode_filters({"size": 12}) == "&size=12"


def test_multi_select_values_are_pipe_joined_in_selection_order():
    selection = {"size": 12, "medium": {"oil": 1, "acrylic": 2}}

    assert encode_filters(selection) == "&size=12&medium=1|2"


def test_categories_follow_mapping_order():
    selection = {
        "size": 24,
        "culture": {"Dutch": 37526778},
        "medium": {"oil": 2028390, "acrylic": 54321},
        "period": {"Baroque": 2037},
    }

    assert encode_filters(selection) == "&size=24&culture=37526778&medium=2028390|54321&period=2037"


def test_size_comes_first_even_when_listed_later():
    assert encode_filters({"medium": {"oil": 1}, "size": 12}) == "&size=12&medium=1"


def test_scalar_category_is_plain_key_value():
    assert encode_filters({"size": 12, "hasimage": 1}) == "&size=12&hasimage=1"


def test_empty_category_is_skipped():
    assert encode_filters({"size": 12, "medium": {}, "culture": {"Chinese": 7}}) == "&size=12&culture=7"


def test_absent_selection_returns_none():
    assert encode_filters(None) is None
    assert encode_filters({}) is None


def test_selection_without_size_is_rejected():
    with pytest.raises(ValueError):
        encode_filters({"medium": {"oil": 1}})


def test_filter_selection_object_is_accepted():
    selection = FilterSelection(size=48)
    selection.select("medium", "oil", 1)
    selection.select("medium", "acrylic", 2)

    assert encode_filters(selection) == "&size=48&medium=1|2"


def test_to_query_string_strips_leading_ampersand():
    assert to_query_string("&size=12&medium=1|2") == "?size=12&medium=1|2"


def test_to_query_string_of_nothing_is_empty():
    assert to_query_string(None) == ""
