from gallery_api.utils.query_utils import mask_api_key, restore_api_key, serialize_query


def test_serialize_flat_query_in_key_order():
    query = {"size": "12", "medium": "1|2", "culture": "123"}

    assert serialize_query(query) == "&size=12&medium=1|2&culture=123"


def test_serialize_empty_query():
    assert serialize_query({}) == ""


def test_serialize_converts_values_with_str():
    assert serialize_query({"size": 12, "page": 2}) == "&size=12&page=2"


def test_serialize_keeps_commas_and_encodes_reserved_characters():
    query = {"fields": "id,title", "q": "rose & thorn"}

    assert serialize_query(query) == "&fields=id,title&q=rose%20%26%20thorn"


def test_mask_replaces_every_occurrence():
    url = "https://example.org/object?apikey=abc&x=abc"

    assert mask_api_key(url, "abc", "API_KEY") == "https://example.org/object?apikey=API_KEY&x=API_KEY"


def test_mask_without_key_leaves_url_alone():
    assert mask_api_key("https://example.org/object", "", "API_KEY") == "https://example.org/object"
    assert mask_api_key("", "abc", "API_KEY") == ""


def test_restore_reverses_mask():
    masked = "https://example.org/object?apikey=API_KEY&page=2"

    assert restore_api_key(masked, "abc", "API_KEY") == "https://example.org/object?apikey=abc&page=2"
