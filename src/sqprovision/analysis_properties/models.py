"""
Pydantic data models for analysis properties.

An AnalysisProperties collection is created fresh by each provisioning run
and handed to the caller. Entries keep their insertion order and are never
removed or replaced.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Property(BaseModel):
    """A single analysis setting consumed by downstream tooling."""

    id: str = Field(..., description="Well-known property key")
    value: str = Field(..., description="Property value, usually a filesystem path")

    class Config:
        extra = "forbid"


class AnalysisProperties(BaseModel):
    """
    Ordered, append-only collection of Property entries.
    """

    properties: List[Property] = Field(default_factory=list)

    class Config:
        extra = "forbid"

    def add(self, prop: Property) -> None:
        """
        Append a property to the end of the collection.

        Args:
            prop: The property to append
        """
        self.properties.append(prop)

    def find(self, property_id: str) -> Optional[Property]:
        """
        Get the first property with the given id.

        Args:
            property_id: The property key to look up

        Returns:
            Property or None if not found
        """
        for prop in self.properties:
            if prop.id == property_id:
                return prop
        return None

    def ids(self) -> List[str]:
        return [prop.id for prop in self.properties]

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to a plain id -> value mapping, preserving insertion order.

        Returns:
            Dictionary of property ids to values
        """
        return {prop.id: prop.value for prop in self.properties}

    def __len__(self) -> int:
        return len(self.properties)
