"""Uldar — Widget schemas."""
from typing import Any

from pydantic import BaseModel, Field


class WidgetRenderingConfiguration(BaseModel):
    """
    One node of a widget tree.
    `configuration` is opaque here; only the data provider registered for `id` interprets it.
    """

    id: str = Field(..., min_length=1, description="Identity of the widget which renders this node")
    configuration: Any = Field(default_factory=dict)
    nested: list["WidgetRenderingConfiguration"] = Field(default_factory=list)

    def widget_ids(self) -> list[str]:
        """All widget ids of the tree, pre-order (self first, then each child), duplicates kept."""
        ids = [self.id]
        for child in self.nested:
            ids.extend(child.widget_ids())
        return ids


class WidgetApiRequest(BaseModel):
    """API request sent by a widget."""

    data: Any = None


class WidgetApiResponse(BaseModel):
    """Provider answer to a widget API request; `data` may legitimately be None."""

    data: Any = None
