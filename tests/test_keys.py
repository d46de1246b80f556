from argusui.keys import default_key_map


def test_default_key_map_first_keys():
    km = default_key_map()
    assert km.new.keys[0] == "n"
    assert km.quit.keys[0] == "q"
    assert km.help.keys[0] == "?"
    assert km.filter.keys[0] == "/"
    assert km.confirm.keys[0] == "enter"
    assert km.cancel.keys[0] == "esc"


def test_quit_also_bound_to_ctrl_c():
    assert default_key_map().quit.keys == ("q", "ctrl+c")


def test_short_help():
    km = default_key_map()
    assert km.short_help() == [km.new, km.attach, km.status_fwd, km.delete, km.quit, km.help]


def test_full_help():
    km = default_key_map()
    groups = km.full_help()
    assert len(groups) == 4
    assert groups[0] == [km.new, km.attach, km.delete, km.destroy]
    assert groups[3][-1] == km.quit


def test_help_text():
    km = default_key_map()
    assert (km.new.help_key, km.new.help_desc) == ("n", "new task")
    assert (km.prune.help_key, km.prune.help_desc) == ("^r", "prune completed")