"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields default to the permissive behavior. Override what you need::

        config = RouterConfig(strict_params=True, indexed=True)
    """

    # Reject patterns such as "/a/:x/:x" instead of letting the last capture win
    strict_params: bool = False

    # Build a segment index on freeze() and match through it
    indexed: bool = False

    # Log unmatched lookups at DEBUG on the "signpost.routing" logger
    log_misses: bool = False

    # dispatch_async: run plain def handlers in a worker thread
    offload_sync_handlers: bool = False
