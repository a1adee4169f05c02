# ident.py
"""
Rust identifier conversions used to predict the paths prost generates.

These must produce the same output as prost-build's private `ident` module,
which in turn uses the word splitting of the `heck` crate. If prost-build
changes its casing or keyword rules, the tables below have to change with it.
"""
from __future__ import annotations

from typing import Iterator

# Raw identifiers (`r#kw`): https://doc.rust-lang.org/reference/keywords.html
RAW_KEYWORDS: frozenset[str] = frozenset(
    {
        # 2015 strict keywords.
        "as", "break", "const", "continue", "else", "enum", "false",
        "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut",
        "pub", "ref", "return", "static", "struct", "trait", "true",
        "type", "unsafe", "use", "where", "while",
        # 2018 strict keywords.
        "dyn",
        # 2015 reserved keywords.
        "abstract", "become", "box", "do", "final", "macro", "override", "priv", "typeof",
        "unsized", "virtual", "yield",
        # 2018 reserved keywords.
        "async", "await", "try",
    }
)

# Not allowed as raw identifiers, so these get an underscore suffix instead.
SUFFIX_KEYWORDS: frozenset[str] = frozenset({"self", "super", "extern", "crate"})

RAW_PREFIX = "r#"

_BOUNDARY, _LOWER, _UPPER = range(3)


def _segments(s: str) -> Iterator[str]:
    """Split on anything that is not alphanumeric; empty pieces are kept."""
    start = 0
    for i, c in enumerate(s):
        if not c.isalnum():
            yield s[start:i]
            start = i + 1
    yield s[start:]


def split_words(s: str) -> list[str]:
    """
    Break an identifier into words the way heck does.

    A word ends where a lowercase letter is followed by an uppercase one
    ("fooBar" -> foo, Bar), and an acronym run ends before its last capital
    when that capital starts a lowercase word ("HTTPServer" -> HTTP, Server).
    Digits never start a new word.
    """
    words: list[str] = []
    for segment in _segments(s):
        init = 0
        mode = _BOUNDARY
        last = len(segment) - 1
        for i, c in enumerate(segment):
            if i == last:
                words.append(segment[init:])
                break
            nxt = segment[i + 1]
            if c.islower():
                next_mode = _LOWER
            elif c.isupper():
                next_mode = _UPPER
            else:
                next_mode = mode

            if next_mode == _LOWER and nxt.isupper():
                words.append(segment[init : i + 1])
                init = i + 1
                mode = _BOUNDARY
            elif mode == _UPPER and c.isupper() and nxt.islower():
                words.append(segment[init:i])
                init = i
                mode = _BOUNDARY
            else:
                mode = next_mode
    return words


def to_upper_camel(s: str) -> str:
    """Convert to an `UpperCamel` Rust type name."""
    words = split_words(s)
    if not words:
        # nothing alphanumeric to case, pass through
        return s
    ident = "".join(w[:1].upper() + w[1:].lower() for w in words)
    # `Self` cannot be a raw identifier.
    if ident == "Self":
        ident += "_"
    return ident


def to_snake(s: str) -> str:
    """Convert `camelCase` or `SCREAMING_SNAKE_CASE` to a `lower_snake` Rust identifier."""
    words = split_words(s)
    if not words:
        return s
    ident = "_".join(w.lower() for w in words)
    if ident in RAW_KEYWORDS:
        ident = RAW_PREFIX + ident
    elif ident in SUFFIX_KEYWORDS:
        ident += "_"
    return ident


def to_module_name(package_name: str) -> str:
    """
    Convert a dotted protobuf package to a Rust module path.

    "google.protobuf" -> "google::protobuf". Segments are not validated.
    """
    return "::".join(to_snake(part) for part in package_name.split("."))
