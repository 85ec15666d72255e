import pytest

from vitaftp.lang import (
    DEFAULT_STRINGS,
    IDENTIFIERS,
    SystemLanguage,
    Translation,
    format_display_site,
    language_file,
)

LANG_DIR = "ux0:app/FTPCLI001/lang"


def test_identifiers_index_translation_in_order():
    translation = Translation()
    assert len(IDENTIFIERS) == 61
    by_name = [translation[name] for name in IDENTIFIERS]
    by_index = [translation[index] for index in range(61)]
    assert by_name == by_index
    assert by_index[-1] == "Deleted"


def test_defaults_are_english():
    translation = Translation()
    assert translation["STR_SITE"] == "Site"
    assert translation["STR_DELETED"] == "Deleted"
    assert translation[0] == "Connection Settings"


def test_configured_language_wins_and_is_trimmed():
    assert language_file("  Thai ", SystemLanguage.ITALIAN) == f"{LANG_DIR}/Thai.ini"


@pytest.mark.parametrize(
    "code, name",
    [
        (SystemLanguage.ITALIAN, "Italiano"),
        (SystemLanguage.PORTUGUESE_PT, "Portuguese_BR"),
        (SystemLanguage.PORTUGUESE_BR, "Portuguese_BR"),
        (SystemLanguage.CHINESE_S, "Chinese_Simplified"),
        (SystemLanguage.CHINESE_T, "Chinese_Traditional"),
        (SystemLanguage.ENGLISH_US, "English"),
        (SystemLanguage.UKRAINIAN, "English"),
    ],
)
def test_console_language_picks_file(code, name):
    assert language_file("", code) == f"{LANG_DIR}/{name}.ini"


def test_plain_int_console_code_and_custom_dir():
    assert language_file("   ", int(SystemLanguage.GERMAN), "lang") == "lang/German.ini"
    assert language_file(None, 99, "lang") == "lang/English.ini"


def test_update_from_text_replaces_known_strings():
    translation = Translation()
    changed = translation.update_from_text(
        "STR_SITE=Sitio\nSTR_UNKNOWN=x\nno equals here\nSTR_YES=Si\n"
    )
    assert changed == ["STR_SITE", "STR_YES"]
    assert translation["STR_SITE"] == "Sitio"
    assert translation["STR_YES"] == "Si"
    assert translation["STR_NO"] == "No"


def test_escaped_newlines_become_line_breaks():
    translation = Translation()
    translation.update_from_text("STR_DEL_CONFIRM_MSG=one\\ntwo\\nthree\n")
    assert translation["STR_DEL_CONFIRM_MSG"] == "one\ntwo\nthree"


def test_empty_value_is_ignored():
    translation = Translation()
    assert translation.update_from_text("STR_SITE=\n") == []
    assert translation["STR_SITE"] == DEFAULT_STRINGS["STR_SITE"]


def test_instances_do_not_share_strings():
    first = Translation()
    first.update_from_text("STR_LOCAL=Lokal")
    assert Translation()["STR_LOCAL"] == "Local"
    assert DEFAULT_STRINGS["STR_LOCAL"] == "Local"


def test_load_file(tmp_path):
    path = tmp_path / "German.ini"
    path.write_text("STR_REMOTE=Entfernt\nSTR_UPLOAD=Hochladen\n", encoding="utf-8")
    translation = Translation()
    assert translation.load(path) is True
    assert translation["STR_REMOTE"] == "Entfernt"
    assert translation["STR_UPLOAD"] == "Hochladen"


def test_load_missing_file_keeps_defaults(tmp_path):
    translation = Translation()
    assert translation.load(tmp_path / "missing.ini") is False
    assert translation.strings == DEFAULT_STRINGS


def test_display_site_uses_label_and_number():
    assert format_display_site("Sitio", "Site 3") == "Sitio 3"
    assert format_display_site("Site", "Site 12") == "Site 12"


@pytest.mark.parametrize("bad", ["Site", "", " 3", "Site x"])
def test_display_site_without_number_raises(bad):
    with pytest.raises(ValueError):
        format_display_site("Site", bad)