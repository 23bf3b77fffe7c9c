"""String generation keyed by field-name hints.

:func:`generate_string` classifies a lower-cased field name by the first
matching substring rule and delegates to one category generator:

============  ==========================================  ====================
category      hint substrings                             meaningful output
============  ==========================================  ====================
email         ``email``, ``mail``                         ``john.smith@gmail.com``
name          ``name`` (not ``username``/``filename``)    ``John Smith``
username      ``username``, ``user``                      ``john`` / ``john123``
city          ``city``, ``location``                      ``Chicago``
address       ``address``                                 ``12 Cedar Street, Rome``
phone         ``phone``, ``mobile``                       ``+1 555 123 4567``
url           ``url``, ``website``                        ``https://www.gmail.com``
sentence      ``description``, ``comment``, ``note``      ``Cloud data team.``
word          anything else                               ``platform``
============  ==========================================  ====================

When ``meaningful_content`` is disabled every category yields lower-case
gibberish of a category specific length.  Emails and URLs keep their ``@``
and ``.`` separators and phone numbers keep their numeric format.
"""

from __future__ import annotations

import random
import string
from collections.abc import Callable, Sequence

from dummygen.config import DummyConfig, Language

from . import wordlists

__all__ = [
    "generate_address",
    "generate_city",
    "generate_email",
    "generate_gibberish",
    "generate_name",
    "generate_phone_number",
    "generate_random_string",
    "generate_sentence",
    "generate_string",
    "generate_url",
    "generate_username",
]


def generate_gibberish(min_length: int, max_length: int, *, rng: random.Random) -> str:
    """Return random lower-case ASCII letters of length in ``[min, max]``."""

    length = rng.randint(min_length, max_length)
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def _pick(items: Sequence[str], fallback: str, rng: random.Random) -> str:
    if not items:
        return fallback
    return items[rng.randrange(len(items))]


# ---------------------------------------------------------------------------
# Category generators
# ---------------------------------------------------------------------------


def generate_name(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return a full name such as ``John Smith`` or ``Ahmet Yılmaz``."""

    if not cfg.meaningful_content:
        return generate_gibberish(5, 12, rng=rng)
    first = _pick(wordlists.first_names(cfg.lang), "John", rng)
    last = _pick(wordlists.last_names(cfg.lang), "Doe", rng)
    return f"{first} {last}"


def generate_email(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return ``first.last@domain`` with a common mail provider domain."""

    if not cfg.meaningful_content:
        local = generate_gibberish(5, 10, rng=rng)
        host = generate_gibberish(5, 8, rng=rng)
        return f"{local}@{host}.com"
    first = _pick(wordlists.first_names(cfg.lang), "john", rng).lower()
    last = _pick(wordlists.last_names(cfg.lang), "doe", rng).lower()
    domain = _pick(wordlists.EMAIL_DOMAINS, "example.com", rng)
    return f"{first}.{last}@{domain}"


def generate_username(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return a lower-cased first name, sometimes followed by a number."""

    if not cfg.meaningful_content:
        return generate_gibberish(6, 12, rng=rng)
    handle = _pick(wordlists.first_names(cfg.lang), "user", rng).lower()
    number = rng.randrange(1000)
    return f"{handle}{number}" if rng.random() < 0.5 else handle


def generate_city(cfg: DummyConfig, *, rng: random.Random) -> str:
    if not cfg.meaningful_content:
        return generate_gibberish(4, 10, rng=rng)
    if cfg.lang is Language.TR:
        return _pick(wordlists.CITIES[Language.TR], "Antalya", rng)
    return _pick(wordlists.CITIES[Language.EN], "New York", rng)


def generate_address(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return ``<number> <Word> Street, <City>``."""

    if not cfg.meaningful_content:
        return generate_gibberish(10, 20, rng=rng)
    number = rng.randint(1, 9999)
    street = _pick(wordlists.words(Language.EN), "Main", rng).capitalize()
    return f"{number} {street} Street, {generate_city(cfg, rng=rng)}"


def generate_phone_number(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return ``+CC NNN NNN NNNN``; Turkish numbers use mobile prefixes."""

    if cfg.lang is Language.TR:
        prefix = f"+90 {rng.randint(500, 1099)}"
    else:
        prefix = f"+1 {rng.randint(100, 999)}"
    return f"{prefix} {rng.randint(100, 999)} {rng.randrange(10000):04d}"


def generate_url(cfg: DummyConfig, *, rng: random.Random) -> str:
    if not cfg.meaningful_content:
        return f"https://{generate_gibberish(5, 10, rng=rng)}.com"
    return f"https://www.{_pick(wordlists.EMAIL_DOMAINS, 'example.com', rng)}"


def generate_sentence(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return 5 to 12 words, capitalized and terminated with a period."""

    if not cfg.meaningful_content:
        return generate_gibberish(20, 50, rng=rng)
    vocabulary = wordlists.words(cfg.lang)
    count = rng.randint(5, 12)
    text = " ".join(_pick(vocabulary, "word", rng) for _ in range(count))
    return text[0].upper() + text[1:] + "."


def generate_random_string(cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return a single vocabulary word."""

    if not cfg.meaningful_content:
        return generate_gibberish(5, 15, rng=rng)
    return _pick(wordlists.words(cfg.lang), "random", rng)


# ---------------------------------------------------------------------------
# Heuristic dispatch
# ---------------------------------------------------------------------------

_Generator = Callable[..., str]


def _is_person_name(hint: str) -> bool:
    return "name" in hint and "username" not in hint and "filename" not in hint


_RULES: tuple[tuple[Callable[[str], bool], _Generator], ...] = (
    (lambda h: "email" in h or "mail" in h, generate_email),
    (_is_person_name, generate_name),
    (lambda h: "username" in h or "user" in h, generate_username),
    (lambda h: "city" in h or "location" in h, generate_city),
    (lambda h: "address" in h, generate_address),
    (lambda h: "phone" in h or "mobile" in h, generate_phone_number),
    (lambda h: "url" in h or "website" in h, generate_url),
    (lambda h: "description" in h or "comment" in h or "note" in h, generate_sentence),
)


def generate_string(hint: str, cfg: DummyConfig, *, rng: random.Random) -> str:
    """Return a string for a field named ``hint`` (matched case-insensitively)."""

    name = hint.lower()
    for matches, generator in _RULES:
        if matches(name):
            return generator(cfg, rng=rng)
    return generate_random_string(cfg, rng=rng)
