"""Domain normalization helpers."""


def normalize_note(note: str | None) -> str | None:
    """Normalize a free-text balance note.

    Args:
        note: Raw note supplied with a recorded balance.

    Returns:
        str | None: Trimmed note, or None when nothing remains.
    """
    if not note:
        return None
    cleaned = note.strip()
    return cleaned if cleaned else None


__all__ = ["normalize_note"]
