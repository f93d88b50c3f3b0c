"""Slide-in state of the sidebar on narrow screens."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

FORWARD = 'forward'
BACK = 'back'


@dataclass
class SidebarState:
    """Which way the toggle chevron points and how far the sidebar is shifted."""
    side: str = FORWARD
    offset: str = '0'

    def toggle(self, viewport_width: Optional[int], breakpoint_px: int = 580) -> bool:
        """
        Flip the sidebar between open and closed.

        Wide viewports always show the sidebar, so nothing changes there.
        An unknown width is treated as narrow.

        Returns:
            True if the state changed
        """
        if viewport_width is not None and viewport_width > breakpoint_px:
            return False

        if self.side == FORWARD:
            self.side, self.offset = BACK, '0'
        else:
            self.side, self.offset = FORWARD, '-100%'
        return True

    def style(self) -> Dict[str, str]:
        return {'transform': f'translateX({self.offset})'}

    def icon(self) -> str:
        return f'chevron-{self.side}-outline'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SidebarState':
        return cls(**data) if data else cls()
