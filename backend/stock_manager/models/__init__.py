"""ORM models for the component_manager schema."""

from stock_manager.models.inventory import Category, Component, SubCategory, SubComponent

__all__ = ["Category", "SubCategory", "Component", "SubComponent"]
