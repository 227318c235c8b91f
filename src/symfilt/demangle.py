"""Demangler adapter — wraps rust-demangler behind a never-failing call.

The library raises on anything it cannot decode; callers here always get
a DemangledName back, falling back to the original text.
"""

from __future__ import annotations
import logging
import re

from rust_demangler import demangle as _rust_demangle

from .types import DemangledName

log = logging.getLogger(__name__)

# Legacy symbols end their path with a "17h<16 hex>" element before the final E
_LEGACY_HASH = re.compile(r"17(h[0-9a-f]{16})E")
# ... which the library may keep in its output, ahead of any ".cold"/"." suffix
_DISPLAYED_HASH = re.compile(r"::(h[0-9a-f]{16})(?=\.|$)")


def demangle(candidate: str) -> DemangledName:
    """Demangle one candidate symbol.  Never raises.

    Only the legacy ``::h<16 hex>`` hash is tracked.  The library drops v0
    crate disambiguators entirely, so v0 names render the same with or
    without ``include_hash``.
    """
    try:
        text = _rust_demangle(candidate)
    except Exception as e:  # library signals "not mangled" by raising
        log.debug("not a recognised symbol %r: %s", candidate, e)
        return DemangledName(original=candidate, name=candidate, recognized=False)

    if not text:
        return DemangledName(original=candidate, name=candidate, recognized=False)

    m = _DISPLAYED_HASH.search(text)
    if m:
        return DemangledName(
            original=candidate,
            name=text[:m.start()],
            hash=m.group(1),
            suffix=text[m.end():],
        )

    hash_ = None
    name, suffix = text, ""
    legacy = _LEGACY_HASH.search(candidate) if candidate.startswith("_ZN") else None
    if legacy:
        hash_ = legacy.group(1)
        # hash already hidden by the library; keep it ahead of the tail
        tail = candidate[legacy.end():]
        if tail and text.endswith(tail):
            name, suffix = text[:-len(tail)], tail
    return DemangledName(original=candidate, name=name, hash=hash_, suffix=suffix)
