import logging

import pytest

from pinyintable.xmlutil import load_file_content, parse_engine_version, show_message


def test_load_file_content_round_trip(tmp_path):
    path = tmp_path / "content.txt"
    content = "第一行\nsecond line\n"
    path.write_text(content, encoding="utf-8")
    assert load_file_content(path) == content


def test_load_file_content_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file_content(tmp_path / "missing.txt")


def test_parse_engine_version_keeps_first(tmp_path):
    path = tmp_path / "engines.xml"
    path.write_text(
        "<engines><engine><version>1.2.3</version></engine>"
        "<engine><version>9.9</version></engine></engines>",
        encoding="utf-8",
    )
    assert parse_engine_version(path) == "1.2.3"


def test_parse_engine_version_without_version(tmp_path):
    path = tmp_path / "engines.xml"
    path.write_text("<engines><engine><name>x</name></engine></engines>", encoding="utf-8")
    assert parse_engine_version(path) is None


def test_parse_engine_version_ignores_text_outside_tag(tmp_path):
    path = tmp_path / "engines.xml"
    path.write_text(
        "<component><name>pinyin</name><version>3.0</version></component>",
        encoding="utf-8",
    )
    assert parse_engine_version(path) == "3.0"


def test_parse_engine_version_malformed_keeps_found_value(tmp_path):
    path = tmp_path / "broken.xml"
    path.write_text("<a><version>2.0</version><b></a>", encoding="utf-8")
    assert parse_engine_version(path) == "2.0"


def test_parse_engine_version_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_engine_version(tmp_path / "none.xml")


def test_show_message_summary_only(caplog):
    with caplog.at_level(logging.INFO, logger="pinyintable.xmlutil"):
        shown = show_message("Updated", None)
    assert shown == "Updated"
    assert "Updated" in caplog.text


def test_show_message_with_details(caplog):
    with caplog.at_level(logging.INFO, logger="pinyintable.xmlutil"):
        shown = show_message("Updated", "restart needed")
    assert shown == "Updated\nrestart needed"
    assert "restart needed" in caplog.text