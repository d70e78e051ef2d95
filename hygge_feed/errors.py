"""
Exceptions raised by the hygge feed data model.
"""


class HyggeFeedError(Exception):
    """Base class for errors raised by this package."""


class UnknownInteractionType(HyggeFeedError, ValueError):
    """An interaction type outside the InteractionType enumeration."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown interaction type: {value!r}")


class PaginationStateError(HyggeFeedError, ValueError):
    """A feed whose has_more flag disagrees with its next_cursor."""

    def __init__(self, has_more: bool, next_cursor: str | None):
        self.has_more = has_more
        self.next_cursor = next_cursor
        super().__init__(
            f"has_more={has_more} but next_cursor={next_cursor!r}"
        )
