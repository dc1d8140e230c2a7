"""Seed a SynonymStore from a WordNet lexicon installed for ``wn``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from synonym_graph.exceptions import DataImportError
from synonym_graph.store import SynonymStore
from synonym_graph.words import canonical

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportSummary:
    """Counts from one WordNet import."""

    lexicon: str
    synsets_seen: int
    groups_linked: int
    groups_skipped: int


def import_from_wn(store: SynonymStore, lexicon: str) -> ImportSummary:
    """Link the lemmas of every synset in *lexicon* as one synonym group.

    Synsets with fewer than two distinct lemmas carry no synonym relation
    and are skipped. The whole import runs as one store batch.
    """
    import wn

    try:
        wordnet = wn.Wordnet(lexicon)
        synsets = wordnet.synsets()
    except wn.Error as e:
        raise DataImportError(f"Failed to open lexicon {lexicon!r}: {e}") from e

    linked = skipped = 0
    with store.batch():
        for synset in synsets:
            lemmas = _distinct_lemmas(synset.lemmas())
            if len(lemmas) < 2:
                skipped += 1
                continue
            result = store.link(lemmas[0], lemmas[1:])
            if result.is_valid:
                linked += 1
            else:
                skipped += 1
                logger.warning(
                    f"Skipped synset {synset.id}: {result.message}"
                )

    logger.info(
        f"Imported {linked} group(s) from {lexicon} "
        f"({skipped} of {len(synsets)} synset(s) skipped)"
    )
    return ImportSummary(
        lexicon=lexicon,
        synsets_seen=len(synsets),
        groups_linked=linked,
        groups_skipped=skipped,
    )


def _distinct_lemmas(lemmas: list) -> list[str]:
    seen: dict[str, str] = {}
    for lemma in lemmas:
        form = str(lemma)
        seen.setdefault(canonical(form), form)
    return list(seen.values())
