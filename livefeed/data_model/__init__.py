"""Shared data model primitives."""

from livefeed.data_model.base import StrictBaseModel


__all__ = ["StrictBaseModel"]
