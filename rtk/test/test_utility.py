import pytest
from rtk import _utility
from rtk.tuples import Tuple, point

@pytest.fixture
def config_dirs(tmp_path, monkeypatch):
    cwd = tmp_path/'cwd'
    home = tmp_path/'home'
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv('HOME', str(home))
    _utility.clear_config_cache()
    yield cwd, home
    _utility.clear_config_cache()

def test_load_config_missing(config_dirs):
    assert _utility.load_config() == {}
    assert _utility.get_config() == _utility.DEFAULT_CONFIG

def test_load_config_home(config_dirs):
    cwd, home = config_dirs
    (home/'rtk.yml').write_text('print_precision: 3\n')
    assert _utility.load_config() == {'print_precision': 3}

def test_load_config_cwd_before_home(config_dirs):
    cwd, home = config_dirs
    (home/'rtk.yml').write_text('print_precision: 3\n')
    (cwd/'rtk.yml').write_text('print_precision: 2\n')
    assert _utility.get_config()['print_precision'] == 2

def test_load_config_empty_file(config_dirs):
    cwd, home = config_dirs
    (cwd/'rtk.yml').write_text('')
    assert _utility.load_config() == {}

def test_load_config_not_mapping(config_dirs):
    cwd, home = config_dirs
    (cwd/'rtk.yml').write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        _utility.load_config()

def test_get_config_cached(config_dirs):
    cwd, home = config_dirs
    assert _utility.get_config()['print_precision'] == 6
    (cwd/'rtk.yml').write_text('print_precision: 2\n')
    assert _utility.get_config()['print_precision'] == 6
    _utility.clear_config_cache()
    assert _utility.get_config()['print_precision'] == 2

def test_str_uses_print_precision(config_dirs):
    cwd, home = config_dirs
    assert str(point(1, 2, 3)) == 'point(1, 2, 3, 1)'
    (cwd/'rtk.yml').write_text('print_precision: 2\n')
    _utility.clear_config_cache()
    assert str(Tuple(3.14159, 0, -2.5, 0)) == 'vector(3.1, 0, -2.5, 0)'
