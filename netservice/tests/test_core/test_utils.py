import pytest
from netservice.core.utils import merge_dicts, to_camel_case

@pytest.mark.parametrize(
    "name,expected",
    [
        ("user_id", "userId"),
        ("created_at_utc", "createdAtUtc"),
        ("id", "id"),
        ("_private_field", "_privateField"),
        ("already_camelCase", "alreadyCamelCase"),
        ("__", "__"),
    ],
)
def test_to_camel_case(name, expected):
    """Test snake_case to camelCase conversion"""
    assert to_camel_case(name) == expected

def test_merge_dicts():
    """Test recursive dictionary merging"""
    dict1 = {"a": 1, "b": {"c": 2, "d": 3}}
    dict2 = {"b": {"c": 4, "e": 5}, "f": 6}

    result = merge_dicts(dict1, dict2)

    assert result == {"a": 1, "b": {"c": 4, "d": 3, "e": 5}, "f": 6}
    assert dict1 == {"a": 1, "b": {"c": 2, "d": 3}}
