from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .fragments import Fragment, FragmentKind
from .objects import Rectangle, from_json, get_json
from .selector import (
    COMBINATORS,
    DuplicateFragmentError,
    OutOfOrderError,
    Selector,
    SelectorBuilder,
    SelectorError,
    builder,
    combine,
    stringify,
)


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


__version__ = _get_version()

__all__ = [
    "COMBINATORS",
    "DuplicateFragmentError",
    "Fragment",
    "FragmentKind",
    "OutOfOrderError",
    "Rectangle",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "__version__",
    "builder",
    "combine",
    "from_json",
    "get_json",
    "stringify",
]
