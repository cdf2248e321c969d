"""Views: layout composition on top of the template renderer."""

from raptor.views.composer import ViewComposer

__all__ = ["ViewComposer"]
