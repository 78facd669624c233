"""Error shielding between the catalog core and whoever shows errors to users.

`guard` is the single place where an internal failure is turned into a safe
one:
- CatalogError subclasses are already safe: logged at WARNING, re-raised as is.
- anything else is logged at ERROR with its traceback and replaced by an
  InternalError carrying only the caller's message.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional, TypeVar

from .errors import CatalogError, InternalError


logger = logging.getLogger(__name__)

T = TypeVar("T")


def guard(action: Callable[[], T], safe_message: str, log: Optional[logging.Logger] = None) -> T:
    """Run `action` and shield unexpected failures.

    Raises:
        CatalogError: the action's own CatalogError, unchanged.
        InternalError: with exactly `safe_message`, for any other failure.
    """
    log = log or logger
    try:
        return action()
    except CatalogError:
        log.warning("Application error", exc_info=True)
        raise
    except Exception:
        log.exception("Internal error")
        # suppress the chain so the original text cannot leak through
        raise InternalError(safe_message) from None
