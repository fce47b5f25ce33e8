"""Wiki article parser and registry."""
