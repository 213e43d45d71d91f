"""Shared type aliases used across signpost modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — called as handler(request, response), may return a new Response
Handler: TypeAlias = Callable[..., Any]

# Captured path parameters (name -> raw segment text)
Params: TypeAlias = dict[str, str]
