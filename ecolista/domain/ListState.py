"""ListState: explicit state of the product list screen.

Only the controller mutates it. The displayed view is never stored here; it is
recomputed from ``rows`` and the view mode on demand.
"""
from typing import Iterable, Optional, Tuple

from ecolista.domain.Product import Product
from ecolista.utilities.constants import VIEW_ALL, VIEW_CATEGORY, VIEW_QUERY, VIEW_FREQUENT

VIEW_MODES = (VIEW_ALL, VIEW_CATEGORY, VIEW_QUERY, VIEW_FREQUENT)


class ListState:
    def __init__(self):
        self.rows: Tuple[Product, ...] = ()
        self.view_mode: str = VIEW_ALL
        # Category for VIEW_CATEGORY, settled search text for VIEW_QUERY
        self.view_arg: Optional[str] = None
        # Raw text of the search box (may not be settled yet)
        self.query_text: str = ""
        self.loading: bool = False
        self.history_visible: bool = False

    def replace_rows(self, rows: Iterable[Product]):
        '''Swap in a fresh snapshot as a whole.'''
        self.rows = tuple(rows)

    def set_view(self, mode: str, arg: Optional[str] = None):
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode}")
        self.view_mode = mode
        self.view_arg = arg if mode in (VIEW_CATEGORY, VIEW_QUERY) else None

    def __str__(self) -> str:
        arg = f"({self.view_arg})" if self.view_arg is not None else ""
        return f"ListState {self.view_mode}{arg} rows={len(self.rows)} loading={self.loading}"

    def __repr__(self) -> str:
        return self.__str__()
