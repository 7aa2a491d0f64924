import logging

import pytest

from iniman import IniManager, IniWriteError, InvalidInput

SAMPLE = """
; sample
[window]
width = 800
height=600 ; px
title = "My App"

[paths]
home=/home/user
"""


@pytest.fixture
def manager():
    return IniManager(SAMPLE)


def test_construct_empty():
    ini = IniManager()
    assert ini.get_data() == {}
    assert ini.to_string() == ''


def test_construct_from_text(manager):
    assert manager.get('window', 'width') == '800'
    assert manager.get('window', 'height') == '600'
    assert manager.get('window', 'title') == 'MyApp'
    assert manager.get('paths', 'home') == '/home/user'


def test_construct_from_file(tmp_path):
    fn = tmp_path / 'app.ini'
    fn.write_text(SAMPLE, encoding='utf-8')
    ini = IniManager(fn, is_file=True)
    assert ini.get_data() == IniManager(SAMPLE).get_data()


def test_parse_empty_clears_state(manager):
    with pytest.raises(InvalidInput):
        manager.parse('')
    assert manager.get_data() == {}


def test_load_empty_text_is_invalid(manager):
    with pytest.raises(InvalidInput):
        manager.load('')
    assert len(manager) == 0


def test_reload_replaces(manager):
    manager.load('[other]\nk=v\n')
    assert manager.get_data() == {'other': {'k': 'v'}}


def test_load_missing_file_is_quiet(manager, tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        manager.load(str(tmp_path / 'missing.ini'), is_file=True)
    assert manager.get_data() == {}
    assert 'nothing to read' in caplog.text


def test_load_blank_file(tmp_path):
    fn = tmp_path / 'blank.ini'
    fn.write_text('', encoding='utf-8')
    assert IniManager(fn, is_file=True).get_data() == {}


def test_load_non_utf8_file(tmp_path):
    fn = tmp_path / 'latin.ini'
    fn.write_bytes('[café]\nnom=crème brûlée\n'.encode('cp1252'))
    ini = IniManager(fn, is_file=True)
    assert len(ini) == 1
    section, = ini
    assert ini.get(section, 'nom')


def test_get_errors(manager):
    with pytest.raises(InvalidInput, match='get_data'):
        manager.get('', 'width')
    with pytest.raises(InvalidInput, match='get_header'):
        manager.get('window', '')
    with pytest.raises(InvalidInput, match='not found'):
        manager.get('nope', 'width')


def test_get_missing_key_does_not_insert(manager):
    assert manager.get('window', 'depth') == ''
    assert not manager.has_key('window', 'depth')


def test_invalid_input_is_value_error(manager):
    with pytest.raises(ValueError):
        manager.set('', 'k', 'v')


def test_set(manager):
    manager.set('window', 'width', '1024')
    manager.set('new', 'k', 'v')
    assert manager.get('window', 'width') == '1024'
    assert manager.get_data()['new'] == {'k': 'v'}
    with pytest.raises(InvalidInput):
        manager.set('window', '', 'v')


def test_set_empty_deletes(manager):
    manager.set('window', 'width', '')
    assert not manager.has_key('window', 'width')
    # absent key, absent section: no-op
    manager.set('window', 'width', '')
    manager.set('ghost', 'k', '')
    assert not manager.has_section('ghost')


def test_get_header_auto_creates():
    ini = IniManager()
    sect = ini.get_header('new')
    assert dict(sect) == {}
    assert ini.get_data() == {'new': {}}
    assert ini.has_section('new')
    with pytest.raises(InvalidInput):
        ini.get_header('')


def test_index_access_edits_in_place(manager):
    manager['window']['depth'] = '32'
    manager['fresh']['k'] = 'v'
    assert manager.get('window', 'depth') == '32'
    assert manager.get('fresh', 'k') == 'v'
    assert manager.get_or_create_section('fresh') == {'k': 'v'}


def test_header_view_goes_stale_after_reload(manager):
    sect = manager['window']
    manager.load('[window]\nwidth=1\n')
    with pytest.raises(ReferenceError):
        sect['width']


def test_get_data_is_a_snapshot(manager):
    snap = manager.get_data()
    snap['window']['width'] = '1'
    del snap['paths']
    assert manager.get('window', 'width') == '800'
    assert 'paths' in manager


def test_remove_header(manager):
    assert manager.remove_header('paths')
    assert not manager.remove_header('paths')
    assert list(manager) == ['window']


def test_to_string_skips_empty_sections():
    ini = IniManager('[a]\nx=1\n')
    ini.get_header('empty')
    assert ini.to_string() == '[a]\nx=1\n\n'
    assert str(ini) == ini.to_string()


def test_round_trip(manager):
    again = IniManager(manager.to_string())
    assert again.get_data() == manager.get_data()


def test_save_and_reload(manager, tmp_path):
    fn = tmp_path / 'out.ini'
    manager.save(fn)
    assert IniManager(fn, is_file=True).get_data() == manager.get_data()


def test_save_unwritable_raises(manager, tmp_path):
    with pytest.raises(IniWriteError) as info:
        manager.save(tmp_path / 'no' / 'such' / 'dir.ini')
    assert isinstance(info.value, OSError)
    with pytest.raises(OSError):
        manager.save(tmp_path)
