from theme_locator.active_theme import ActiveTheme


def test_active_theme_exposes_name_and_themes():
    theme = ActiveTheme("bar", ["foo", "bar", "foobar"])
    assert theme.name == "bar"
    assert theme.get_name() == "bar"
    assert theme.all_themes == ("foo", "bar", "foobar")
    assert theme.get_all_themes() == ("foo", "bar", "foobar")


def test_active_theme_name_can_be_reassigned_without_validation():
    theme = ActiveTheme("foo", ["foo", "bar"])
    theme.set_name("bar")
    assert theme.name == "bar"
    theme.name = "not-listed"
    assert theme.get_name() == "not-listed"
    assert theme.is_known() is False
    assert theme.is_known("foo") is True


def test_active_theme_list_is_copied_at_construction():
    themes = ["foo", "bar"]
    theme = ActiveTheme("foo", themes)
    themes.append("baz")
    assert theme.all_themes == ("foo", "bar")
