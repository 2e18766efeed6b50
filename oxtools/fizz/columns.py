"""Column type mapping and English inflection helpers for migrations."""

from __future__ import annotations

import re

_TYPE_MAP = {
    "int": "integer",
    "time.time": "timestamp",
    "time": "timestamp",
    "datetime": "timestamp",
    "uuid.uuid": "uuid",
    "uuid": "uuid",
    "nulls.float32": "float",
    "nulls.float64": "float",
    "slices.string": "varchar[]",
    "slices.uuid": "varchar[]",
    "[]string": "varchar[]",
    "slices.float": "numeric[]",
    "[]float": "numeric[]",
    "[]float32": "numeric[]",
    "[]float64": "numeric[]",
    "slices.int": "int[]",
    "slices.map": "jsonb",
    "float32": "decimal",
    "float64": "decimal",
    "float": "decimal",
    "blob": "blob",
    "[]byte": "blob",
}


def column_type(value: str) -> str:
    """Map a Go-ish type name to the migration column type."""
    mapped = _TYPE_MAP.get(value.lower())
    if mapped is not None:
        return mapped
    if value.startswith("nulls."):
        return column_type(value.replace("nulls.", ""))
    return value.lower()


_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_WORDS = re.compile(r"[A-Z]+(?![a-z])\d*|[A-Z]?[a-z]+\d*|\d+")


def underscore(name: str) -> str:
    """Return name in lower snake case ("FirstName" -> "first_name")."""
    parts = [
        word.lower()
        for chunk in _SEPARATORS.split(name)
        for word in _WORDS.findall(chunk)
    ]
    return "_".join(parts)


_IRREGULARS = {
    "person": "people",
    "woman": "women",
    "man": "men",
    "child": "children",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "ox": "oxen",
    "knife": "knives",
    "wife": "wives",
    "life": "lives",
    "movie": "movies",
}
_IRREGULAR_PLURALS = {plural: singular for singular, plural in _IRREGULARS.items()}

_UNCOUNTABLES = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "deer",
        "news",
    }
)

_PLURAL_RULES = (
    ("quiz", "quizzes"),
    ("matrix", "matrices"),
    ("vertex", "vertices"),
    ("index", "indices"),
    ("ysis", "yses"),
    ("ss", "sses"),
    ("sh", "shes"),
    ("ch", "ches"),
    ("zz", "zzes"),
    ("x", "xes"),
    ("z", "zes"),
    ("us", "uses"),
    ("lf", "lves"),
)

_SINGULAR_RULES = (
    ("quizzes", "quiz"),
    ("matrices", "matrix"),
    ("vertices", "vertex"),
    ("indices", "index"),
    ("yses", "ysis"),
    ("sses", "ss"),
    ("shes", "sh"),
    ("ches", "ch"),
    ("zzes", "zz"),
    ("xes", "x"),
    ("uses", "us"),
    ("lves", "lf"),
    ("ies", "y"),
)

_SINGULAR_ENDINGS = ("ss", "us", "is")
_VOWELS = frozenset("aeiou")


def _ends_with_word(lower: str, suffix: str) -> bool:
    if not lower.endswith(suffix):
        return False
    start = len(lower) - len(suffix)
    return start == 0 or not lower[start - 1].isalpha()


def _replace_tail(word: str, length: int, replacement: str) -> str:
    head, tail = word[: len(word) - length], word[len(word) - length:]
    if len(tail) > 1 and tail.isupper():
        replacement = replacement.upper()
    elif tail[:1].isupper():
        replacement = replacement[:1].upper() + replacement[1:]
    return head + replacement


def _by_length(table: dict[str, str]) -> list[tuple[str, str]]:
    return sorted(table.items(), key=lambda item: len(item[0]), reverse=True)


def _is_uncountable(lower: str) -> bool:
    return any(_ends_with_word(lower, word) for word in _UNCOUNTABLES)


def _pluralize_raw(word: str) -> str:
    lower = word.lower()
    for singular, plural in _by_length(_IRREGULARS):
        if _ends_with_word(lower, singular):
            return _replace_tail(word, len(singular), plural)
    for suffix, replacement in _PLURAL_RULES:
        if lower.endswith(suffix):
            return _replace_tail(word, len(suffix), replacement)
    if len(lower) > 1 and lower.endswith("y") and lower[-2] not in _VOWELS:
        return _replace_tail(word, 1, "ies")
    return word + ("S" if len(word) > 1 and word.isupper() else "s")


def singularize(word: str) -> str:
    """Return the singular form of an English word."""
    lower = word.lower()
    if not lower or _is_uncountable(lower):
        return word
    for plural, singular in _by_length(_IRREGULAR_PLURALS):
        if _ends_with_word(lower, plural):
            return _replace_tail(word, len(plural), singular)
    for suffix, replacement in _SINGULAR_RULES:
        if lower.endswith(suffix):
            return _replace_tail(word, len(suffix), replacement)
    if lower.endswith(_SINGULAR_ENDINGS):
        return word
    if lower.endswith("s"):
        return word[:-1]
    return word


def pluralize(word: str) -> str:
    """Return the plural form of an English word; plurals are left alone."""
    lower = word.lower()
    if not lower or _is_uncountable(lower):
        return word
    if any(_ends_with_word(lower, plural) for plural in _IRREGULAR_PLURALS):
        return word
    singular = singularize(word)
    if singular != word and _pluralize_raw(singular).lower() == lower:
        return word
    return _pluralize_raw(word)