"""Fixture document normalization.

Turns fixture documents into storage documents:

    {"id": "w1", "name": "a", "links": {"owner": "u1"}}
        -> {"_id": "w1", "name": "a", "owner": "u1"}

Only documents that carry an ``id`` are rewritten; their ``links`` mapping
is flattened into the document root and removed.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any

from fixture_testkit.core.constants import FIXTURE_ID_KEY, LINKS_KEY, STORAGE_ID_KEY

FixtureDocument = MutableMapping[str, Any]


def normalize_fixture_docs(
    docs: FixtureDocument | list[FixtureDocument] | tuple[FixtureDocument, ...],
) -> list[FixtureDocument]:
    """Flatten fixture documents into storage documents, in place.

    The given documents are mutated and returned in a list; deep-copy them
    first if the originals must survive.

    Args:
        docs: A single document or a list of documents.

    Returns:
        list: The normalized documents, one-element list for a single document.
    """
    if isinstance(docs, tuple):
        docs = list(docs)
    elif not isinstance(docs, list):
        docs = [docs]

    for doc in docs:
        if FIXTURE_ID_KEY not in doc:
            continue
        doc[STORAGE_ID_KEY] = doc.pop(FIXTURE_ID_KEY)
        links = doc.get(LINKS_KEY)
        if isinstance(links, Mapping):
            for key, value in links.items():
                doc[key] = value
            del doc[LINKS_KEY]
    return docs
