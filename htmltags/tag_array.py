"""List of tags whose string form is the concatenated markup."""

from __future__ import annotations

from typing import Any, Callable, Iterable


class HtmlTagArray(list):
    """A ``list`` with a concatenating ``str()``.

    This allows the following::

        tags = HtmlTagArray.from_sequence([tag1, tag2])
        script_tags = tags.filter(lambda tag: tag.tag_name == "script")
        html = str(script_tags)

    Elements are converted with ``str()``; the array never renders tag
    objects itself. Use :func:`htmltags.renderable.prepare_tags_for_rendering`
    to get elements that stringify to markup.
    """

    @classmethod
    def from_sequence(cls, items: Iterable[Any]) -> "HtmlTagArray":
        return cls(items)

    def filter(self, predicate: Callable[[Any], bool]) -> "HtmlTagArray":
        return HtmlTagArray(item for item in self if predicate(item))

    def map(self, func: Callable[[Any], Any]) -> "HtmlTagArray":
        return HtmlTagArray(func(item) for item in self)

    def __getitem__(self, index):
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return HtmlTagArray(result)
        return result

    def __add__(self, other: Iterable[Any]) -> "HtmlTagArray":
        return HtmlTagArray(list(self) + list(other))

    def __radd__(self, other: Iterable[Any]) -> "HtmlTagArray":
        return HtmlTagArray(list(other) + list(self))

    def __mul__(self, count: int) -> "HtmlTagArray":
        return HtmlTagArray(list(self) * count)

    __rmul__ = __mul__

    def copy(self) -> "HtmlTagArray":
        return HtmlTagArray(self)

    def join(self, separator: str = "") -> str:
        return separator.join(str(item) for item in self)

    def to_text(self) -> str:
        return self.join()

    def __str__(self) -> str:
        return self.join()

    def __html__(self) -> str:
        # Lets Jinja2 autoescaping insert the markup untouched.
        return self.join()


__all__ = ["HtmlTagArray"]
