"""Locked records.

Ids are generated so the set can grow without editing each entry.
"""


def fixtures():
    return [{"id": f"lock-{n}", "label": f"record {n}"} for n in range(1, 4)]
