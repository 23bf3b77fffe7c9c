"""Language word lists shipped as package data.

Lists are plain UTF-8 text files under ``dummygen/values/data`` with one
entry per line.  Each list is read at most once per process and cached as an
immutable tuple.  A missing resource yields an empty tuple and a warning;
generators then fall back to a fixed default word.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources as importlib_resources

from dummygen.config import Language
from dummygen.utils.logging import get_logger

__all__ = ["EMAIL_DOMAINS", "CITIES", "first_names", "last_names", "load_wordlist", "words"]

log = get_logger(__name__)

EMAIL_DOMAINS: tuple[str, ...] = (
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "example.com",
    "company.com",
    "test.org",
    "sample.net",
)

CITIES: dict[Language, tuple[str, ...]] = {
    Language.EN: (
        "New York",
        "Los Angeles",
        "Chicago",
        "Houston",
        "Phoenix",
        "Philadelphia",
        "London",
        "Berlin",
        "Paris",
        "Madrid",
        "Rome",
        "Amsterdam",
        "Tokyo",
        "Sydney",
        "Toronto",
        "Vienna",
    ),
    Language.TR: (
        "Antalya",
        "Mersin",
        "İstanbul",
        "Ankara",
        "İzmir",
        "Bursa",
        "Adana",
        "Gaziantep",
        "Konya",
        "Diyarbakır",
        "Kayseri",
        "Eskişehir",
        "Samsun",
        "Denizli",
        "Trabzon",
        "Balıkesir",
        "Malatya",
    ),
}


@lru_cache(maxsize=None)
def load_wordlist(name: str) -> tuple[str, ...]:
    """Return the stripped, non-empty lines of the data file ``name``.txt."""

    resource = (
        importlib_resources.files("dummygen.values").joinpath("data").joinpath(f"{name}.txt")
    )
    try:
        with resource.open("r", encoding="utf-8") as f:
            return tuple(line.strip() for line in f if line.strip())
    except FileNotFoundError:
        log.warning("word list %r not found; using fallback values", name)
        return ()


def first_names(lang: Language) -> tuple[str, ...]:
    return load_wordlist(f"first_names_{lang.value}")


def last_names(lang: Language) -> tuple[str, ...]:
    return load_wordlist(f"last_names_{lang.value}")


def words(lang: Language) -> tuple[str, ...]:
    return load_wordlist(f"words_{lang.value}")
