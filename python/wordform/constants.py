"""
Default inflection data.

Rules are listed in registration order. Each one is prepended when the
table is built, so entries further down a list are checked first.
"""

import re

_I = re.IGNORECASE

PLURAL_RULES = [
    (re.compile(r"\Z"), "s"),
    (re.compile(r"s\Z", _I), "s"),
    (re.compile(r"(ax|test)is\Z", _I), r"\1es"),
    (re.compile(r"(.*)us\Z", _I), r"\1uses"),
    (re.compile(r"(octop|vir|cact)us\Z", _I), r"\1i"),
    (re.compile(r"(octop|vir)i\Z", _I), r"\1i"),
    (re.compile(r"(alias|status)\Z", _I), r"\1es"),
    (re.compile(r"(buffal|domin|ech|embarg|her|mosquit|potat|tomat)o\Z", _I), r"\1oes"),
    (re.compile(r"(?<!b)um\Z", _I), r"\1a"),  # no group 1: expands to ""
    (re.compile(r"([ti])a\Z", _I), r"\1a"),
    (re.compile(r"sis\Z", _I), "ses"),
    (re.compile(r"(.*)(?:([^f]))fe*\Z", _I), r"\1\2ves"),
    (re.compile(r"(hive|proof)\Z", _I), r"\1s"),
    (re.compile(r"([^aeiouy]|qu)y\Z", _I), r"\1ies"),
    (re.compile(r"(x|ch|ss|sh)\Z", _I), r"\1es"),
    (re.compile(r"(stoma|epo)ch\Z", _I), r"\1chs"),
    (re.compile(r"(matr|vert|ind)(?:ix|ex)\Z", _I), r"\1ices"),
    (re.compile(r"([m|l])ouse\Z", _I), r"\1ice"),
    (re.compile(r"([m|l])ice\Z", _I), r"\1ice"),
    (re.compile(r"^(ox)\Z", _I), r"\1en"),
    (re.compile(r"^(oxen)\Z", _I), r"\1"),
    (re.compile(r"(quiz)\Z", _I), r"\1zes"),
    (re.compile(r"(.*)non\Z", _I), r"\1na"),
    (re.compile(r"(.*)ma\Z", _I), r"\1mata"),
    (re.compile(r"(.*)(eau|eaux)\Z"), r"\1eaux"),
]

SINGULAR_RULES = [
    (re.compile(r"s\Z", _I), ""),
    (re.compile(r"(n)ews\Z", _I), r"\1ews"),
    (re.compile(r"([ti])a\Z", _I), r"\1um"),
    (
        re.compile(
            r"(analy|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)\Z", _I
        ),
        r"\1\2sis",
    ),
    (re.compile(r"(^analy)(sis|ses)\Z", _I), r"\1sis"),
    (re.compile(r"([^f])ves\Z", _I), r"\1fe"),
    (re.compile(r"(hive)s\Z", _I), r"\1"),
    (re.compile(r"(tive)s\Z", _I), r"\1"),
    (re.compile(r"([lr])ves\Z", _I), r"\1f"),
    (re.compile(r"([^aeiouy]|qu)ies\Z", _I), r"\1y"),
    (re.compile(r"(s)eries\Z", _I), r"\1eries"),
    (re.compile(r"(m)ovies\Z", _I), r"\1ovie"),
    (re.compile(r"(ss)\Z", _I), r"\1"),
    (re.compile(r"(x|ch|ss|sh)es\Z", _I), r"\1"),
    (re.compile(r"([m|l])ice\Z", _I), r"\1ouse"),
    (re.compile(r"(us)(es)?\Z", _I), r"\1"),
    (re.compile(r"(o)es\Z", _I), r"\1"),
    (re.compile(r"(shoe)s\Z", _I), r"\1"),
    (re.compile(r"(cris|ax|test)(is|es)\Z", _I), r"\1is"),
    (re.compile(r"(octop|vir)(us|i)\Z", _I), r"\1us"),
    (re.compile(r"(alias|status)(es)?\Z", _I), r"\1"),
    (re.compile(r"(ox)en", _I), r"\1"),
    (re.compile(r"(vert|ind)ices\Z", _I), r"\1ex"),
    (re.compile(r"(matr)ices\Z", _I), r"\1ix"),
    (re.compile(r"(quiz)zes\Z", _I), r"\1"),
    (re.compile(r"(database)s\Z", _I), r"\1"),
]

# (singular, plural)
IRREGULARS = [
    ("person", "people"),
    ("man", "men"),
    ("human", "humans"),
    ("child", "children"),
    ("sex", "sexes"),
    ("foot", "feet"),
    ("tooth", "teeth"),
    ("goose", "geese"),
    ("forum", "forums"),
]

UNCOUNTABLES = [
    "hovercraft",
    "moose",
    "deer",
    "milk",
    "rain",
    "Swiss",
    "grass",
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
]

ACRONYMS = [
    "API",
    "CSRF",
    "CSV",
    "DB",
    "HMAC",
    "HTTP",
    "JSON",
    "OpenSSL",
]

# abs(n) % 100 values that always take "th" (11th, 12th, 13th)
ORDINALIZE_TH = frozenset({11, 12, 13})

DEFAULT_SEPARATOR = " "

# Module path delimiter ("admin.users") and its filesystem-style spelling
SEGMENT_DELIMITER = "."
PATH_SEPARATOR = "/"
