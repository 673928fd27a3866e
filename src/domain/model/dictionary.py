"""Dictionary domain models.

Value objects produced by the DICT protocol client. None of them outlive
the call that produced them; the caller owns them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Database:
    """A dictionary database offered by the server."""
    name: str
    description: str = ""

    @property
    def is_reserved(self) -> bool:
        """True for the protocol's wildcard databases (`*` and `!`)."""
        return self.name in RESERVED_DATABASE_NAMES


@dataclass(frozen=True)
class MatchingStrategy:
    """A word-matching strategy offered by the server (exact, prefix, ...)."""
    name: str
    description: str = ""


@dataclass(frozen=True)
class Definition:
    """One definition of a headword taken from one database.

    Uniqueness is (headword, source_database): the same headword may come
    back once per database that defines it.
    """
    headword: str
    source_database: str
    body: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Body lines joined with newlines."""
        return "\n".join(self.body)


# ── Reserved names ────────────────────────────────────────────
# Passed through to the server unchanged; the client does not interpret them.

ALL_DATABASES = Database("*", "All databases")
FIRST_MATCH = Database("!", "First database with a match")

RESERVED_DATABASE_NAMES = frozenset({ALL_DATABASES.name, FIRST_MATCH.name})

EXACT = MatchingStrategy("exact", "Match headwords exactly")
PREFIX = MatchingStrategy("prefix", "Match prefixes")
