# tablemap/runtime/borrow.py
#
# Run-time enforcement of the row-view borrowing rules. A column store owns
# one BorrowTracker; every row view holds a Borrow token taken from it.
#
# The rules mirror "one mutable xor many shared" borrows, checked lazily:
#   * taking an exclusive borrow invalidates every token handed out before;
#   * taking a shared borrow ends the active exclusive borrow, if any;
#   * a structural mutation of the table invalidates every token.
# A view only fails when it is *used* after losing its borrow, so code that
# drops a view and moves on never pays for it.

from ..errors import BorrowError


class Borrow:
    """A borrow token held by a single row view."""

    __slots__ = ("tracker", "generation", "exclusive", "released")

    def __init__(self, tracker, generation, exclusive):
        self.tracker = tracker
        self.generation = generation
        self.exclusive = exclusive
        self.released = False

    def check(self):
        self.tracker.check(self)

    def release(self):
        self.tracker.release(self)

    def __repr__(self):
        kind = "exclusive" if self.exclusive else "shared"
        state = "released" if self.released else f"gen={self.generation}"
        return f"<Borrow {kind} {state}>"


class BorrowTracker:
    """
    Hands out borrow tokens for one column store and validates them.

    The tracker keeps a generation counter. A token is valid while its
    generation matches the tracker's and it has not been released.
    """
    def __init__(self):
        self.generation = 0
        self._writer = None

    @property
    def writer(self):
        """The active exclusive token, or None."""
        return self._writer

    def shared(self) -> Borrow:
        if self._writer is not None:
            # A new reader ends the active writer's borrow.
            self.generation += 1
            self._writer = None
        return Borrow(self, self.generation, exclusive=False)

    def exclusive(self) -> Borrow:
        self.generation += 1
        token = Borrow(self, self.generation, exclusive=True)
        self._writer = token
        return token

    def invalidate(self):
        """Called on every structural mutation of the store."""
        self.generation += 1
        self._writer = None

    def release(self, token: Borrow):
        token.released = True
        if self._writer is token:
            self._writer = None

    def check(self, token: Borrow):
        if token.released:
            raise BorrowError("row view was used after being released")
        if token.generation != self.generation:
            if token.exclusive:
                raise BorrowError(
                    "mutable row view is stale: the table was borrowed again or modified since it was created"
                )
            raise BorrowError(
                "row view is stale: the table was borrowed mutably or modified since it was created"
            )
