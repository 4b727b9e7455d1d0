"""iTunes podcast extension elements for channels and items."""

__all__ = ["category", "channel_extension", "common", "item_extension", "owner"]