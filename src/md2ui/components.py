#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/components.py
"""Component registry: which renderer draws which tag.

A registry entry is one of two variants:

- :class:`PlainTag` renders the element as a tag, possibly a different one
  (``{"h1": "h2"}`` demotes headings);
- :class:`CustomRenderer` wraps a callable that receives the element props
  (including ``children`` and ``node``) and returns what to render.

Raw strings and callables are coerced to those variants when the registry is
built. Any other value is rejected at that point with
:class:`~md2ui.exceptions.InvalidComponentError`, never later during a
render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Union

from md2ui.exceptions import InvalidComponentError


@dataclass(frozen=True)
class PlainTag:
    """Render an element as the named tag."""

    name: str

    def __post_init__(self) -> None:
        """Reject empty tag names."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidComponentError(str(self.name), self.name, message=f"Invalid plain tag name: {self.name!r}")


@dataclass(frozen=True)
class CustomRenderer:
    """Render an element by calling ``function(props)``.

    Parameters
    ----------
    function : callable
        Called with a single mapping of props; may return a
        :class:`~md2ui.elements.CompiledElement`, a string, a list of those,
        or None
    name : str, optional
        Display name used in debugging output; defaults to the function name

    """

    function: Callable[[dict[str, Any]], Any]
    name: str = ""

    def __post_init__(self) -> None:
        """Reject non-callables and fill in the display name."""
        if not callable(self.function):
            raise InvalidComponentError(
                self.name or "?", self.function, message=f"Custom renderer is not callable: {self.function!r}"
            )
        if not self.name:
            object.__setattr__(self, "name", getattr(self.function, "__name__", type(self.function).__name__))

    def __call__(self, props: dict[str, Any]) -> Any:
        """Invoke the wrapped function."""
        return self.function(props)


Renderer = Union[PlainTag, CustomRenderer]


def coerce_renderer(tag_name: str, value: Any) -> Renderer:
    """Turn a registry value into a renderer variant.

    Parameters
    ----------
    tag_name : str
        Tag the value is registered for (used in error messages)
    value : Any
        Tag name string, callable, or an already-built variant

    Returns
    -------
    PlainTag or CustomRenderer
        The renderer variant

    Raises
    ------
    InvalidComponentError
        If the value is neither a non-empty string nor callable

    """
    if isinstance(value, (PlainTag, CustomRenderer)):
        return value
    if isinstance(value, str) and value:
        return PlainTag(value)
    if callable(value):
        return CustomRenderer(value)
    raise InvalidComponentError(tag_name, value)


class ComponentRegistry(Mapping[str, Renderer]):
    """Read-only mapping of tag name to renderer.

    Parameters
    ----------
    components : Mapping, optional
        Tag name to tag-name string, callable, ``PlainTag`` or
        ``CustomRenderer``

    Raises
    ------
    InvalidComponentError
        If any value cannot render

    Examples
    --------
    >>> registry = ComponentRegistry({"h1": "h2", "em": lambda props: props["children"]})
    >>> registry.resolve("h1")
    PlainTag(name='h2')
    >>> registry.resolve("p")
    PlainTag(name='p')

    """

    def __init__(self, components: Mapping[str, Any] | None = None):
        """Validate and store the registry entries."""
        self._renderers: dict[str, Renderer] = {}
        for tag_name, value in (components or {}).items():
            self._renderers[tag_name] = coerce_renderer(tag_name, value)

    def __getitem__(self, tag_name: str) -> Renderer:
        """Return the renderer registered for ``tag_name``."""
        return self._renderers[tag_name]

    def __iter__(self) -> Iterator[str]:
        """Iterate over registered tag names."""
        return iter(self._renderers)

    def __len__(self) -> int:
        """Return the number of registered tags."""
        return len(self._renderers)

    def __repr__(self) -> str:
        """Show registered tags."""
        return f"ComponentRegistry({self._renderers!r})"

    def resolve(self, tag_name: str) -> Renderer:
        """Return the renderer for ``tag_name``, defaulting to the tag itself."""
        renderer = self._renderers.get(tag_name)
        if renderer is None:
            return PlainTag(tag_name)
        return renderer
