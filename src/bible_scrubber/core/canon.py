"""Canonical book order and chapter counts for the 66-book Protestant canon."""

from __future__ import annotations

from functools import cache
from types import MappingProxyType

# Canonical order: 39 Old Testament books followed by 27 New Testament books.
BOOK_NAMES: tuple[str, ...] = (
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy", "Joshua",
    "Judges", "Ruth", "1 Samuel", "2 Samuel", "1 Kings", "2 Kings",
    "1 Chronicles", "2 Chronicles", "Ezra", "Nehemiah", "Esther", "Job",
    "Psalms", "Proverbs", "Ecclesiastes", "Song of Solomon", "Isaiah",
    "Jeremiah", "Lamentations", "Ezekiel", "Daniel", "Hosea", "Joel", "Amos",
    "Obadiah", "Jonah", "Micah", "Nahum", "Habakkuk", "Zephaniah", "Haggai",
    "Zechariah", "Malachi",
    "Matthew", "Mark", "Luke", "John", "Acts", "Romans", "1 Corinthians",
    "2 Corinthians", "Galatians", "Ephesians", "Philippians", "Colossians",
    "1 Thessalonians", "2 Thessalonians", "1 Timothy", "2 Timothy", "Titus",
    "Philemon", "Hebrews", "James", "1 Peter", "2 Peter", "1 John", "2 John",
    "3 John", "Jude", "Revelation",
)

OLD_TESTAMENT_BOOK_COUNT = 39

CHAPTER_COUNTS = MappingProxyType({
    "Genesis": 50, "Exodus": 40, "Leviticus": 27, "Numbers": 36,
    "Deuteronomy": 34, "Joshua": 24, "Judges": 21, "Ruth": 4, "1 Samuel": 31,
    "2 Samuel": 24, "1 Kings": 22, "2 Kings": 25, "1 Chronicles": 29,
    "2 Chronicles": 36, "Ezra": 10, "Nehemiah": 13, "Esther": 10, "Job": 42,
    "Psalms": 150, "Proverbs": 31, "Ecclesiastes": 12, "Song of Solomon": 8,
    "Isaiah": 66, "Jeremiah": 52, "Lamentations": 5, "Ezekiel": 48,
    "Daniel": 12, "Hosea": 14, "Joel": 3, "Amos": 9, "Obadiah": 1, "Jonah": 4,
    "Micah": 7, "Nahum": 3, "Habakkuk": 3, "Zephaniah": 3, "Haggai": 2,
    "Zechariah": 14, "Malachi": 4, "Matthew": 28, "Mark": 16, "Luke": 24,
    "John": 21, "Acts": 28, "Romans": 16, "1 Corinthians": 16,
    "2 Corinthians": 13, "Galatians": 6, "Ephesians": 6, "Philippians": 4,
    "Colossians": 4, "1 Thessalonians": 5, "2 Thessalonians": 3,
    "1 Timothy": 6, "2 Timothy": 4, "Titus": 3, "Philemon": 1, "Hebrews": 13,
    "James": 5, "1 Peter": 5, "2 Peter": 3, "1 John": 5, "2 John": 1,
    "3 John": 1, "Jude": 1, "Revelation": 22,
})

ABBREVIATIONS = MappingProxyType({
    "gen": "Genesis", "ex": "Exodus", "exod": "Exodus",
    "lev": "Leviticus", "num": "Numbers", "deut": "Deuteronomy",
    "josh": "Joshua", "judg": "Judges", "rth": "Ruth",
    "1 sam": "1 Samuel", "2 sam": "2 Samuel",
    "1 kgs": "1 Kings", "2 kgs": "2 Kings",
    "1 chr": "1 Chronicles", "2 chr": "2 Chronicles",
    "neh": "Nehemiah", "est": "Esther",
    "ps": "Psalms", "psa": "Psalms", "psalm": "Psalms",
    "prov": "Proverbs", "eccl": "Ecclesiastes",
    "song": "Song of Solomon", "sos": "Song of Solomon",
    "isa": "Isaiah", "jer": "Jeremiah", "lam": "Lamentations",
    "ezek": "Ezekiel", "dan": "Daniel", "hos": "Hosea",
    "ob": "Obadiah", "mic": "Micah", "nah": "Nahum",
    "hab": "Habakkuk", "zeph": "Zephaniah", "hag": "Haggai",
    "zech": "Zechariah", "mal": "Malachi",
    "matt": "Matthew", "mk": "Mark", "lk": "Luke", "jn": "John",
    "rom": "Romans", "1 cor": "1 Corinthians", "2 cor": "2 Corinthians",
    "gal": "Galatians", "eph": "Ephesians", "phil": "Philippians",
    "col": "Colossians", "1 thess": "1 Thessalonians",
    "2 thess": "2 Thessalonians", "1 tim": "1 Timothy",
    "2 tim": "2 Timothy", "tit": "Titus", "phm": "Philemon",
    "heb": "Hebrews", "jas": "James", "1 pet": "1 Peter",
    "2 pet": "2 Peter", "1 jn": "1 John", "2 jn": "2 John",
    "3 jn": "3 John", "rev": "Revelation",
})


class UnknownBookError(ValueError):
    """Raised when a book name is not part of the canon."""

    def __init__(self, book: str):
        super().__init__(f"Unknown book: {book!r}")
        self.book = book


def book_names() -> tuple[str, ...]:
    """Return the 66 book names in canonical order."""
    return BOOK_NAMES


def chapter_count(book: str) -> int:
    """Return the number of chapters in a book."""
    try:
        return CHAPTER_COUNTS[book]
    except KeyError:
        raise UnknownBookError(book) from None


@cache
def total_chapters() -> int:
    """Total number of chapters in the canon (1,189)."""
    return sum(CHAPTER_COUNTS[name] for name in BOOK_NAMES)


def book_index(book: str) -> int:
    """Return the 0-based canonical position of a book."""
    try:
        return BOOK_NAMES.index(book)
    except ValueError:
        raise UnknownBookError(book) from None


def chapter_numbers(book: str) -> range:
    """Enumerate the chapter numbers of a book."""
    return range(1, chapter_count(book) + 1)


def has_chapter(book: str, chapter: int) -> bool:
    """Check that a book exists and contains the given chapter."""
    count = CHAPTER_COUNTS.get(book)
    return count is not None and 1 <= chapter <= count


def resolve_book_name(query: str) -> str | None:
    """Map a full name, abbreviation or prefix to a canonical book name.

    Matching is case-insensitive and tried in this order: exact name,
    abbreviation table, then the first book whose name starts with the query.
    """
    normalized = " ".join(query.lower().split())
    if not normalized:
        return None

    for name in BOOK_NAMES:
        if name.lower() == normalized:
            return name

    if normalized in ABBREVIATIONS:
        return ABBREVIATIONS[normalized]

    for name in BOOK_NAMES:
        if name.lower().startswith(normalized):
            return name

    return None
