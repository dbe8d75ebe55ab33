"""Centralized error message definitions for selector building errors.

Both kinds of invalid append (a repeated singleton fragment and a fragment
placed out of order) are reported through codes defined here, so the exception
classes and any caller displaying them share one set of messages.
"""

from __future__ import annotations

DUPLICATE_FRAGMENT: str = "duplicate-fragment"
FRAGMENT_OUT_OF_ORDER: str = "fragment-out-of-order"


def generate_error_message(code: str, kind: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        kind: Optional fragment kind to include in the message for context

    Returns:
        Human-readable error message string
    """
    messages = {
        DUPLICATE_FRAGMENT: (
            f"Duplicate {kind} fragment: element, id and pseudo-element "
            "should not occur more than one time inside the selector"
        ),
        FRAGMENT_OUT_OF_ORDER: (
            f"Misplaced {kind} fragment: selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        ),
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)
