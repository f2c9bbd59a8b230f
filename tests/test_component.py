from plugspec.component import Component, Enabled, EnabledKind, get_name


def test_get_name_strips_git_suffix_from_url():
    assert get_name("https://host/org/repo.git") == "repo"


def test_get_name_uses_last_path_segment():
    assert get_name("/abs/path/my-plugin") == "my-plugin"


def test_get_name_without_separator_replaces_non_word_runs():
    assert get_name("my.plugin--x") == "my_plugin_x"
    assert get_name("plain.git") == "plain_git"


def test_from_table_splits_triggers_and_opts_without_mutating_table():
    table = {"slug": "org/a", "event": "Start", "branch": "main"}

    component = Component.from_table(table, frozenset({"event"}))

    assert component.slug == "org/a"
    assert component.triggers == {"event": "Start"}
    assert component.opts == {"branch": "main"}
    assert table == {"slug": "org/a", "event": "Start", "branch": "main"}


def test_items_skip_unset_fields():
    component = Component(name="a", triggers={"cmd": ["Run"]}, opts={"tag": None})

    assert dict(component.items()) == {"name": "a", "cmd": ["Run"]}


def test_enabled_from_raw_variants():
    assert Enabled.from_raw(None) is None
    assert Enabled.from_raw(True).kind is EnabledKind.ALWAYS
    assert Enabled.from_raw(False).kind is EnabledKind.NEVER
    assert Enabled.from_raw("yes").kind is EnabledKind.NEVER

    computed = Enabled.from_raw(lambda: 1)
    assert computed.kind is EnabledKind.COMPUTED
    assert computed.evaluate() is True
    assert Enabled.from_raw(lambda: 0).evaluate() is False
