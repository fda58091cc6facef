"""
    Selection model - the start / end node picked by the user.
"""
from typing import Dict, Optional


class Selection:
    """
    Two weak references into the graph's node set.

    The graph clears a reference when the node it points at is removed
    (see ``discard``); nothing here checks that a selected id exists.
    """

    def __init__(self, start: Optional[str] = None, end: Optional[str] = None):
        self.start: Optional[str] = start
        self.end: Optional[str] = end

    def set_start(self, node_id: Optional[str]) -> None:
        self.start = node_id

    def set_end(self, node_id: Optional[str]) -> None:
        self.end = node_id

    def toggle(self, node_id: str) -> None:
        """
        Apply a click on node_id.

            - nothing selected        -> it becomes the start
            - start only, other node  -> it becomes the end
            - click on the start      -> start is cleared
            - click on the end        -> end is cleared
            - both set, third node    -> it replaces the start, end stays
        """
        if self.start is None:
            self.start = node_id
        elif self.end is None and node_id != self.start:
            self.end = node_id
        elif node_id == self.start:
            self.start = None
        elif node_id == self.end:
            self.end = None
        else:
            self.start = node_id

    def discard(self, node_id: str) -> bool:
        """Drop every reference to node_id. Returns True if one was dropped."""
        changed = False
        if self.start == node_id:
            self.start = None
            changed = True
        if self.end == node_id:
            self.end = None
            changed = True
        return changed

    def clear(self) -> None:
        self.start = None
        self.end = None

    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    def __repr__(self) -> str:
        return f"Selection(start={self.start}, end={self.end})"

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {'start': self.start, 'end': self.end}
