import pytest

from clover.source import Source


@pytest.fixture
def sample(tmp_path):
    content = "let x = 1;\nprint x;\n"
    path = tmp_path / "main.clv"
    path.write_text(content, encoding="utf-8")
    return Source(path), content


def test_text_round_trips(sample):
    source, content = sample
    assert source.text() == content


def test_length_matches_content(sample):
    source, content = sample
    assert len(source) == len(content)


def test_at_returns_each_character(sample):
    source, content = sample
    assert [source.at(i) for i in range(len(source))] == list(content)


def test_at_past_end_raises(sample):
    source, _ = sample
    with pytest.raises(IndexError):
        source.at(len(source))


def test_at_negative_raises(sample):
    source, _ = sample
    with pytest.raises(IndexError):
        source.at(-1)


def test_substr_matches_slice(sample):
    source, content = sample
    assert source.substr(4, 5) == content[4:9]


def test_substr_reaching_end_is_rejected(sample):
    source, _ = sample
    with pytest.raises(IndexError):
        source.substr(0, len(source))


def test_substr_just_before_end(sample):
    source, content = sample
    assert source.substr(0, len(source) - 1) == content[:-1]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Source(tmp_path / "absent.clv")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.clv"
    path.write_text("", encoding="utf-8")
    source = Source(path)
    assert len(source) == 0
    with pytest.raises(IndexError):
        source.at(0)


def test_line_endings_preserved(tmp_path):
    path = tmp_path / "crlf.clv"
    path.write_bytes(b"a\r\nb")
    assert Source(path).text() == "a\r\nb"