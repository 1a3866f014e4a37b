"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cladding.application.commands import CalculateLayoutCommand
from cladding.domain import PanelTilingEngine


@lru_cache(maxsize=1)
def get_engine() -> PanelTilingEngine:
    """Get the shared engine; it holds no per-call state."""
    return PanelTilingEngine()


def get_layout_command(
    engine: Annotated[PanelTilingEngine, Depends(get_engine)],
) -> CalculateLayoutCommand:
    """Dependency for CalculateLayoutCommand."""
    return CalculateLayoutCommand(engine=engine)


# Type aliases for cleaner endpoint signatures
LayoutCommandDep = Annotated[CalculateLayoutCommand, Depends(get_layout_command)]
