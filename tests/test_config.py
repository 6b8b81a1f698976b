import pytest

from termodoro.config import Config, ConfigError, Keys, default_keys, get_config


def test_default_keys_values():
    keys = default_keys()
    assert keys.force_quit == ["ctrl+c"]
    assert keys.exit == ["esc"]
    assert keys.help == ["?"]
    assert keys.up == ["w"]
    assert keys.down == ["s"]
    assert keys.left == ["a"]
    assert keys.right == ["d"]


def test_default_keys_returns_fresh_objects():
    first = default_keys()
    first.up.append("k")
    assert default_keys().up == ["w"]


def test_missing_file_gives_defaults(tmp_path):
    config = get_config(tmp_path / "missing.toml")
    assert config == Config(debug_mode=True, keys=None)


def test_debug_mode_read(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("debug_mode = false\n")
    config = get_config(path)
    assert config.debug_mode is False
    assert config.keys is None


def test_partial_keys_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[keys]\nexit = ["esc", "q"]\nup = ["k"]\n')
    config = get_config(str(path))
    assert config.debug_mode is True
    assert config.keys == Keys(exit=["esc", "q"], up=["k"])
    assert config.keys.down == []


def test_unknown_entries_ignored(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('other = 1\n[keys]\nright = ["l"]\nextra = ["x"]\n')
    config = get_config(path)
    assert config.keys.right == ["l"]


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("debug_mode = = true\n")
    with pytest.raises(ConfigError):
        get_config(path)


def test_wrong_debug_mode_type_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('debug_mode = "yes"\n')
    with pytest.raises(ConfigError):
        get_config(path)


@pytest.mark.parametrize(
    "body",
    ['keys = "abc"\n', '[keys]\nup = "w"\n', "[keys]\nup = [1, 2]\n"],
)
def test_wrong_keys_types_raise(tmp_path, body):
    path = tmp_path / "config.toml"
    path.write_text(body)
    with pytest.raises(ConfigError):
        get_config(path)


def test_directory_path_raises(tmp_path):
    with pytest.raises(ConfigError):
        get_config(tmp_path)