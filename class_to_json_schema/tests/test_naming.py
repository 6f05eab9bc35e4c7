import pytest

from class_to_json_schema.naming import is_getter_name, property_name_from_getter, setter_name_for


@pytest.mark.parametrize(
    "getter,expected",
    [
        ("getUserName", "userName"),
        ("isActive", "active"),
        ("get_user_name", "user_name"),
        ("getURL", "uRL"),
        ("get", None),
        ("get_", None),
        ("is", None),
        ("fetchName", None),
    ],
)
def test_property_name_from_getter(getter, expected):
    assert property_name_from_getter(getter) == expected


@pytest.mark.parametrize(
    "getter,expected",
    [
        ("getName", "setName"),
        ("get_name", "set_name"),
        ("isActive", None),
        ("isTarget", "isTarset"),
        ("isgetter", "issetter"),
    ],
)
def test_setter_name_for(getter, expected):
    assert setter_name_for(getter) == expected


def test_is_getter_name():
    assert is_getter_name("getName")
    assert is_getter_name("isActive")
    assert is_getter_name("get")
    assert not is_getter_name("compute")
    assert not is_getter_name("Getname")
