import pytest

from sshkvm.textutil import (
    index_of,
    split,
    strchr,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_index_of_found_and_missing():
    assert index_of("user@host", "@") == 4
    assert index_of("userhost", "@") == -1
    assert index_of(None, "@") == -1


def test_index_of_rejects_multichar():
    with pytest.raises(ValueError):
        index_of("abc", "ab")


def test_split_drops_empty_words():
    words = split("  vmc   extra  ", " ")
    assert words == ["vmc", "extra"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_joined_back():
    text = "ssh-ed25519 AAAAkey user@host"
    assert " ".join(split(text, " ")) == text


def test_strchr_first_and_nul():
    s = "a.b.c"
    assert strchr(s, ".") == 1
    assert strchr(s, "z") is None
    assert strchr(s, "\0") == len(s)


def test_strrchr_last_and_nul():
    s = "a.b.c"
    assert strrchr(s, ".") == 3
    assert strrchr(s, "z") is None
    assert strrchr(s, "\0") == len(s)


def test_strnstr_within_length():
    hay = "lorem ipsum dolor"
    assert strnstr(hay, "", 0) == 0
    assert strnstr(hay, "ipsum", len(hay)) == hay.index("ipsum")
    assert strnstr(hay, "ipsum", 10) is None
    assert strnstr(hay, "ipsum", 11) == 6
    assert strnstr(hay, "xyz", len(hay)) is None


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strlcpy_truncates():
    assert strlcpy("hello", 10) == ("hello", 5)
    assert strlcpy("hello", 3) == ("he", 5)
    assert strlcpy("hello", 0) == ("", 5)
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_behaviour():
    assert strlcat("foo", "bar", 10) == ("foobar", 6)
    assert strlcat("foo", "bar", 5) == ("foob", 6)
    assert strlcat("foo", "bar", 0) == ("foo", 3)
    assert strlcat("foo", "bar", 2) == ("foo", 5)


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin("ab", None) == "ab"
    assert strjoin(None, "cd") == "cd"
    assert strjoin(None, None) is None


def test_strtrim_keeps_first_run():
    assert strtrim("  xx  ", " ") == "xx"
    assert strtrim("--ab-cd--", "-") == "ab"
    assert strtrim("text", None) == "text"
    assert strtrim(None, " ") is None
    assert strtrim("----", "-") == ""


def test_substr():
    s = "abcdef"
    assert substr(s, 2, 3) == "cde"
    assert substr(s, 0, 100) == s
    assert substr(s, len(s) + 1, 2) == ""
    assert substr(s, len(s), 2) == ""
    with pytest.raises(ValueError):
        substr(s, -1, 2)


def test_strmapi_round_trip():
    s = "Hello"
    mapped = strmapi(s, lambda i, c: c.upper())
    assert mapped == s.upper()
    assert strmapi(s, lambda i, c: c) == s
    indexes = strmapi("abc", lambda i, c: str(i))
    assert indexes == "012"


def test_striteri_in_place():
    buf = list("abc")
    striteri(buf, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert buf == ["A", "b", "C"]

    seen = []
    striteri(buf, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "A"), (1, "b"), (2, "C")]
    assert buf == ["A", "b", "C"]