from __future__ import annotations

IDENTITY_PREFIX = "case_"


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def synthesize_identity(identifier: str) -> str:
    """Map a vector identifier onto a test-runner-safe name.

    Every character outside [A-Za-z0-9_] becomes "_", and names that do not
    start with an ASCII letter get the "case_" prefix. The result depends on
    `identifier` alone, so distinct identifiers can collide ("a b" and "a-b"
    both become "a_b"); callers must treat that as an error.
    """

    if not isinstance(identifier, str):
        raise ValueError("identifier must be a string")
    if not identifier.strip():
        raise ValueError("identifier must be a non-empty string")

    out = []
    for ch in identifier:
        if ch.isascii() and (ch.isalnum() or ch == "_"):
            out.append(ch)
        else:
            out.append("_")
    name = "".join(out)
    if not _is_ascii_letter(name[0]):
        name = IDENTITY_PREFIX + name
    return name
