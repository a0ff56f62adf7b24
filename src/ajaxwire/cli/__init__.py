"""Command line interface for ajaxwire."""
