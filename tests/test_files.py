""" Tests for reading and writing documents on disk. """

import io
import logging

import pytest

from innit import (
    IniDocument, IniFileParser, IniYamlParser, InvalidYamlDocument, LineDelim,
    MissingEquals
)


@pytest.fixture
def doc():
    d = IniDocument()
    d.insert("name", "value", "")
    d.insert("path", "C:\\games\\ra2", "Paths")
    d.insert("标题", "尤里的复仇", "L10N")
    return d


def test_ini_round_trip(tmp_path, doc):
    path = str(tmp_path / "out.ini")
    IniFileParser(path, "utf-8").write(doc)
    assert IniFileParser(path, "utf-8").read() == doc


def test_ini_crlf_on_disk(tmp_path, doc):
    path = tmp_path / "crlf.ini"
    IniFileParser(str(path), "utf-8", LineDelim.CRLF).write(doc)
    raw = path.read_bytes()
    assert b"\r\n" in raw
    assert raw.count(b"\n") == raw.count(b"\r\n")
    assert IniFileParser(str(path), "utf-8", LineDelim.CRLF).read() == doc


def test_ini_decode_fallback(tmp_path, caplog):
    path = tmp_path / "gbk.ini"
    value = "值，这是一段比较长的中文文本，用来帮助编码识别。" * 4
    text = f"[小节]\n键 = {value}\n"
    path.write_bytes(text.encode("gbk"))
    with caplog.at_level(logging.WARNING):
        doc = IniFileParser(str(path), "utf-8").read()
    assert doc.get("键", "小节") == value
    assert "chardet" in caplog.text


def test_ini_parse_error_propagates(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("[s]\nbeans\n", encoding="utf-8")
    with pytest.raises(MissingEquals) as exc:
        IniFileParser(str(path), "utf-8").read()
    assert exc.value.lineno == 2


def test_ini_missing_file(tmp_path):
    with pytest.raises(OSError):
        IniFileParser(str(tmp_path / "nope.ini")).read()


def test_yaml_round_trip(tmp_path, doc):
    path = str(tmp_path / "out.yaml")
    IniYamlParser(path).write(doc)
    assert IniYamlParser(path).read() == doc


def test_yaml_values_become_strings(tmp_path):
    path = tmp_path / "typed.yaml"
    path.write_text("General:\n  Speed: 5\n  Enabled: true\n  Empty:\n"
                    "Nothing:\n", encoding="utf-8")
    doc = IniYamlParser(str(path)).read()
    assert doc.get_section("General") == {
        "Speed": "5", "Enabled": "True", "Empty": ""}
    assert doc.get_section("Nothing") == {}


def test_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert IniYamlParser(str(path)).read().is_empty()


@pytest.mark.parametrize("content", ["- a\n- b\n", "s: just a string\n"])
def test_yaml_bad_shape(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidYamlDocument):
        IniYamlParser(str(path)).read()


def test_handler_str():
    ini = IniFileParser("rulesmd.ini", "gbk")
    assert ini.filename == "rulesmd.ini"
    assert ini.encoding == "gbk"
    assert str(ini) == "INI file: rulesmd.ini (gbk)"
    assert str(IniYamlParser("rules.yaml")) == "YAML file: rules.yaml (utf-8)"


@pytest.mark.parametrize("encoding", ["utf-8", "utf-8-sig"])
def test_ini_utf8_bom(tmp_path, encoding):
    path = tmp_path / "bom.ini"
    path.write_bytes("[General]\nName = x\n".encode("utf-8-sig"))
    doc = IniFileParser(str(path), encoding).read()
    assert dict(doc) == {"General": {"Name": "x"}}


def test_readstream_drops_bom():
    doc = IniFileParser("in-memory.ini").readstream(
        io.StringIO("\ufeffkey = value\n"))
    assert doc.get("key") == "value"
