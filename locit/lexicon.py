"""
SQLite lexicon of special cases for Locit.

A lexicon database stores special case entries, one row per base word,
so project-specific irregular words can be kept outside the code and
registered at start-up:

    from locit.lexicon import get_session, load_lexicon

    with get_session("my_words.db") as session:
        load_lexicon(session)

``init_lexicon`` writes the built-in dataset to a fresh database, which is
a convenient starting point for editing.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import Boolean, Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from locit.constants import DeclensionGroup, Gender
from locit.special_cases import REGISTRY, SpecialCaseEntry, SpecialCaseRegistry

logger = logging.getLogger(__name__)


# ============================================================================
# Schema
# ============================================================================

class Base(DeclarativeBase):
    pass


class SpecialCaseRecord(Base):
    """One special case entry, keyed by lowercase base word."""
    __tablename__ = "special_case"

    word: Mapped[str] = mapped_column(String, primary_key=True)
    declension_group: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    suffix_len: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    gender: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    genitive: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    dative: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    accusative: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    instrumental: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    locative: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    vocative: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    use_palatalized: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    plural_only: Mapped[bool] = mapped_column(Boolean, default=False)
    linked_plural: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<SpecialCaseRecord({self.word!r}, group={self.declension_group})>"


# ============================================================================
# Conversion
# ============================================================================

_FORM_FIELDS = ('genitive', 'dative', 'accusative', 'instrumental', 'locative', 'vocative')


def entry_to_record(word: str, entry: SpecialCaseEntry) -> SpecialCaseRecord:
    """Convert a registry entry to a database row."""
    return SpecialCaseRecord(
        word=word,
        declension_group=None if entry.declension_group is None else int(entry.declension_group),
        suffix_len=entry.suffix_len,
        gender=None if entry.gender is None else int(entry.gender),
        use_palatalized=entry.use_palatalized,
        plural_only=entry.plural_only,
        linked_plural=entry.linked_plural,
        **{name: getattr(entry, name) for name in _FORM_FIELDS},
    )


def record_to_entry(record: SpecialCaseRecord) -> SpecialCaseEntry:
    """
    Convert a database row to a registry entry.

    Raises:
        ValueError: The stored group or gender is not a known value.
    """
    return SpecialCaseEntry(
        declension_group=None if record.declension_group is None else DeclensionGroup(record.declension_group),
        suffix_len=record.suffix_len,
        gender=None if record.gender is None else Gender(record.gender),
        use_palatalized=record.use_palatalized,
        plural_only=bool(record.plural_only),
        linked_plural=record.linked_plural,
        **{name: getattr(record, name) for name in _FORM_FIELDS},
    )


# ============================================================================
# Connection
# ============================================================================

class LexiconSession(Session):
    """Session that owns its engine and disposes it on close."""

    def close(self) -> None:
        super().close()
        self.bind.dispose()


def get_session(db_path: Union[str, Path]) -> LexiconSession:
    """
    Open a session on a lexicon database, creating the schema if missing.

    The session owns a dedicated engine; closing the session (or leaving
    its ``with`` block) releases the pooled SQLite connections.

    Args:
        db_path: Path to the SQLite file.

    Returns:
        A new LexiconSession; close it (or use it as a context manager) when done.
    """
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    return LexiconSession(engine)


# ============================================================================
# Loading and Saving
# ============================================================================

def save_special_case(session: Session, word: str, entry: SpecialCaseEntry) -> None:
    """Insert or replace the row for a word. The caller commits."""
    session.merge(entry_to_record(word.lower(), entry))


def load_lexicon(session: Session, registry: Optional[SpecialCaseRegistry] = None) -> int:
    """
    Register every row of a lexicon database.

    Rows with unknown group or gender values are skipped with a warning.

    Args:
        session: Lexicon session.
        registry: Target registry; defaults to the process-wide one.

    Returns:
        Number of entries registered.
    """
    registry = registry if registry is not None else REGISTRY
    count = 0
    records = session.execute(select(SpecialCaseRecord)).scalars().all()
    for record in records:
        try:
            entry = record_to_entry(record)
        except ValueError as e:
            logger.warning(f"Skipping lexicon row {record.word!r}: {e}")
            continue
        registry.register(record.word, entry)
        count += 1
    logger.info(f"Loaded {count} special cases from lexicon")
    return count


def init_lexicon(
    db_path: Union[str, Path],
    registry: Optional[SpecialCaseRegistry] = None,
    force: bool = False,
) -> int:
    """
    Write a registry (the built-in dataset by default) to a new lexicon.

    Args:
        db_path: Path to the SQLite file.
        registry: Source registry; defaults to the process-wide one.
        force: Overwrite an existing file.

    Returns:
        Number of entries written.

    Raises:
        FileExistsError: The file exists and force is False.
    """
    registry = registry if registry is not None else REGISTRY
    db_path = Path(db_path)
    if db_path.exists():
        if not force:
            raise FileExistsError(f"Lexicon already exists: {db_path}")
        db_path.unlink()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with get_session(db_path) as session:
        for word, entry in registry.items():
            save_special_case(session, word, entry)
            count += 1
        session.commit()
    logger.info(f"Created lexicon {db_path} with {count} special cases")
    return count
